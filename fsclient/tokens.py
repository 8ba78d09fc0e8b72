"""Read-only access to the persisted session token.

The token is looked up on every request and never cached here, so a login
or logout elsewhere takes effect on the next call.
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol

import httpx

__all__ = ["TokenStore", "CookieTokenStore", "FileTokenStore"]


class TokenStore(Protocol):
    def read(self) -> str | None:
        """Return the current token, or None when unauthenticated."""
        ...


class CookieTokenStore:
    """Reads the token from a cookie jar under a fixed key."""

    def __init__(self, cookies: httpx.Cookies, key: str) -> None:
        self._cookies = cookies
        self._key = key

    def read(self) -> str | None:
        return self._cookies.get(self._key)


class FileTokenStore:
    """Reads the token from a file written by whatever performed the login.

    A missing or blank file means no token.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def read(self) -> str | None:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        return text.strip() or None
