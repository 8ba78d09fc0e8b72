from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from fsclient.domain.outcomes import HttpFailure, JsonBody, Outcome, TextBody
from fsclient.logging_conf import get_logger
from fsclient.notify import Notifier
from fsclient.session import SessionMonitor
from fsclient.settings import DEFAULT_TOKEN_NAME, JSON_CONTENT_TYPE
from fsclient.tokens import TokenStore
from fsclient.types import AuthFailureError, HttpFailureError, UnexpectedPayloadError

__all__ = ["METHODS", "FALLBACK_ERROR_MESSAGE", "FormData", "Dispatcher"]

logger = get_logger("fsclient.dispatch")

METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
FALLBACK_ERROR_MESSAGE = "Operation failed, check server log."


@dataclass
class FormData:
    """A multipart form body.

    `files` follows httpx's shape: name -> (filename, content[, content_type]).
    """

    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, Any] = field(default_factory=dict)


class Dispatcher:
    """Sends one request at a time and classifies what comes back.

    `send()` only classifies. `dispatch()` adds the side effects (session
    monitor, user notification) and raises on failure.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        tokens: TokenStore,
        session: SessionMonitor,
        notifier: Notifier,
        *,
        token_header: str = DEFAULT_TOKEN_NAME,
    ) -> None:
        self._client = client
        self._tokens = tokens
        self._session = session
        self._notifier = notifier
        self._token_header = token_header

    def _build_request(
        self, method: str, url: str, content_type: str | None, body: Any
    ) -> httpx.Request:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"unsupported method: {method}")

        headers = {self._token_header: self._tokens.read() or ""}
        # No content-type for multipart: httpx writes it with the boundary.
        if content_type:
            headers["Content-Type"] = content_type

        kwargs: dict[str, Any] = {}
        if body is not None and content_type == JSON_CONTENT_TYPE:
            kwargs["content"] = json.dumps(body)
        elif isinstance(body, FormData):
            kwargs["data"] = body.fields
            kwargs["files"] = body.files
        elif body is not None:
            kwargs["content"] = body
        return self._client.build_request(method, url, headers=headers, **kwargs)

    async def send(
        self,
        method: str,
        url: str,
        content_type: str | None = None,
        body: Any = None,
    ) -> Outcome:
        """Send a request and classify the response without side effects.

        Transport errors (httpx.TransportError) propagate as raised.

        Raises:
            UnexpectedPayloadError: if a 2xx response is declared JSON but its
                body does not parse.
        """
        request = self._build_request(method, url, content_type, body)
        response = await self._client.send(request)

        if not response.is_success:
            return HttpFailure(
                method=request.method,
                url=str(request.url),
                status=response.status_code,
                body=response.text,
                response=response,
            )
        if response.headers.get("Content-Type") == JSON_CONTENT_TYPE:
            try:
                return JsonBody(response.json())
            except ValueError as e:
                raise UnexpectedPayloadError(
                    f"{request.method} {request.url} declared JSON but the body does not parse: {e}"
                ) from e
        return TextBody(response.text)

    async def dispatch(
        self,
        method: str,
        url: str,
        content_type: str | None = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON value or text.

        On a non-2xx status the failure is reported (debounced session prompt
        for 401/403, the body text otherwise) and then raised.

        Raises:
            AuthFailureError: on 401/403.
            HttpFailureError: on any other non-2xx status.
        """
        outcome = await self.send(method, url, content_type, body)
        if isinstance(outcome, JsonBody):
            return outcome.value
        if isinstance(outcome, TextBody):
            return outcome.text

        logger.warning(
            "dispatch.failure",
            extra={
                "event": "dispatch_failure",
                "method": outcome.method,
                "url": outcome.url,
                "status_code": outcome.status,
            },
        )
        if outcome.is_auth_failure:
            self._session.trigger()
            raise AuthFailureError(outcome)

        self._notifier.show(_failure_text(outcome))
        raise HttpFailureError(outcome)

    async def get_json(self, url: str) -> Any:
        return await self.dispatch("GET", url, JSON_CONTENT_TYPE)

    async def post_json(self, url: str, payload: Any = None) -> Any:
        return await self.dispatch("POST", url, JSON_CONTENT_TYPE, payload)

    async def put_json(self, url: str, payload: Any = None) -> Any:
        return await self.dispatch("PUT", url, JSON_CONTENT_TYPE, payload)

    async def delete_json(self, url: str, payload: Any = None) -> Any:
        return await self.dispatch("DELETE", url, JSON_CONTENT_TYPE, payload)


def _failure_text(failure: HttpFailure) -> str:
    # httpx reads the body and decodes with errors="replace", so the text is
    # always available; a blank body is the "nothing to show" case.
    return failure.body.strip() or FALLBACK_ERROR_MESSAGE
