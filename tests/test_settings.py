from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fsclient.settings import DEFAULT_REGISTRY_BASE, ClientSettings

_VARS = [
    "FSCLIENT_BASE_URL",
    "FSCLIENT_TOKEN_NAME",
    "FSCLIENT_REGISTRY_BASE",
    "FSCLIENT_SESSION_EXPIRY_DELAY",
    "FSCLIENT_TIMEOUT",
    "FSCLIENT_TOKEN_FILE",
    "FSCLIENT_SESSION_EXPIRY_DELAY_S",
    "FSCLIENT_TIMEOUT_S",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = ClientSettings.from_env()

    assert s.base_url == ""
    assert s.token_name == "fstoken"
    assert s.registry_base == DEFAULT_REGISTRY_BASE
    assert s.session_expiry_delay_s == 0.5
    assert s.token_file is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("FSCLIENT_BASE_URL", "https://gw.example")
    monkeypatch.setenv("FSCLIENT_TOKEN_NAME", "sid")
    monkeypatch.setenv("FSCLIENT_REGISTRY_BASE", "/eureka/apps")
    monkeypatch.setenv("FSCLIENT_SESSION_EXPIRY_DELAY", "1.5")
    monkeypatch.setenv("FSCLIENT_TIMEOUT", "5")
    monkeypatch.setenv("FSCLIENT_TOKEN_FILE", "/run/fs/token")

    s = ClientSettings.from_env()

    assert s.base_url == "https://gw.example"
    assert s.token_name == "sid"
    assert s.registry_base == "/eureka/apps"
    assert s.session_expiry_delay_s == 1.5
    assert s.timeout_s == 5.0
    assert s.token_file == Path("/run/fs/token")


def test_bad_number_raises(monkeypatch):
    monkeypatch.setenv("FSCLIENT_TIMEOUT", "soon")

    with pytest.raises(ValidationError):
        ClientSettings.from_env()


def test_negative_delay_is_rejected(monkeypatch):
    monkeypatch.setenv("FSCLIENT_SESSION_EXPIRY_DELAY", "-1")

    with pytest.raises(ValidationError):
        ClientSettings.from_env()


def test_keyword_arguments_use_field_names():
    s = ClientSettings(base_url="http://gw.test", session_expiry_delay_s=2.0, timeout_s=9.0)

    assert s.base_url == "http://gw.test"
    assert s.session_expiry_delay_s == 2.0
    assert s.timeout_s == 9.0


def test_unknown_prefixed_variables_are_ignored(monkeypatch):
    monkeypatch.setenv("FSCLIENT_SOMETHING_ELSE", "x")

    assert ClientSettings.from_env().token_name == "fstoken"
