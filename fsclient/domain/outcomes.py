from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import httpx

__all__ = [
    "AUTH_FAILURE_STATUSES",
    "JsonBody",
    "TextBody",
    "HttpFailure",
    "Outcome",
]

AUTH_FAILURE_STATUSES = frozenset({401, 403})


@dataclass(frozen=True)
class JsonBody:
    """A 2xx response whose body was declared and decoded as JSON."""

    value: Any


@dataclass(frozen=True)
class TextBody:
    """A 2xx response of any other content type, kept as text."""

    text: str


@dataclass(frozen=True)
class HttpFailure:
    """A non-2xx response.

    `body` is the response text, already read; `response` is kept for callers
    that need headers.
    """

    method: str
    url: str
    status: int
    body: str
    response: httpx.Response = field(repr=False, compare=False)

    @property
    def is_auth_failure(self) -> bool:
        return self.status in AUTH_FAILURE_STATUSES


Outcome = Union[JsonBody, TextBody, HttpFailure]
