from __future__ import annotations

import httpx

from fsclient.tokens import CookieTokenStore, FileTokenStore


def test_cookie_store_reads_live_jar():
    jar = httpx.Cookies()
    store = CookieTokenStore(jar, "fstoken")
    assert store.read() is None

    jar.set("fstoken", "abc")
    assert store.read() == "abc"


def test_file_store(tmp_path):
    path = tmp_path / "token"
    store = FileTokenStore(path)
    assert store.read() is None

    path.write_text("t-1\n", encoding="utf-8")
    assert store.read() == "t-1"

    path.write_text("   ", encoding="utf-8")
    assert store.read() is None
