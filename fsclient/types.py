from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from fsclient.domain.outcomes import HttpFailure


class ClientError(RuntimeError):
    """Base class for errors raised by the client layers."""


class HttpFailureError(ClientError):
    """Raised when a dispatched request comes back with a non-2xx status.

    Carries the classified failure plus the raw response so callers can
    inspect status and body themselves.
    """

    def __init__(self, failure: HttpFailure) -> None:
        super().__init__(f"{failure.method} {failure.url} failed with status {failure.status}")
        self.failure = failure

    @property
    def status(self) -> int:
        return self.failure.status

    @property
    def body(self) -> str:
        return self.failure.body

    @property
    def response(self) -> httpx.Response:
        return self.failure.response


class AuthFailureError(HttpFailureError):
    """Raised for 401/403 responses (session missing or expired)."""


class RegistryParseError(ClientError, ValueError):
    """Raised when a registry document is malformed or lacks a required field."""


class UnexpectedPayloadError(ClientError, ValueError):
    """Raised when a service response does not have the expected shape."""
