"""File-service operations routed through the gateway to one instance."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from fsclient.dispatch import Dispatcher
from fsclient.domain.files import SaveFileResponse, TextFile
from fsclient.domain.services import ServiceDescriptor
from fsclient.domain.urls import host_url
from fsclient.registry import RegistryResolver
from fsclient.types import UnexpectedPayloadError

__all__ = ["FILE_SERVICE_CLASS", "FileServiceApi"]

FILE_SERVICE_CLASS = "fileservice"

M = TypeVar("M", bound=BaseModel)


def _encode(value: str) -> str:
    # Same reserved set as JavaScript's encodeURIComponent.
    return quote(value, safe="-_.!~*'()")


def _validate(model: type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise UnexpectedPayloadError(f"unexpected {model.__name__} payload: {e}") from e


class FileServiceApi:
    def __init__(
        self,
        dispatcher: Dispatcher,
        registry: RegistryResolver,
        *,
        route: Callable[[ServiceDescriptor], str] = host_url,
    ) -> None:
        self._dispatcher = dispatcher
        self._registry = registry
        self._route = route

    async def list_file_services(self) -> list[ServiceDescriptor]:
        """Live file-service instances; the registry URL needs no instance."""
        return await self._registry.resolve_services(FILE_SERVICE_CLASS)

    async def get_text_file(self, instance: ServiceDescriptor, path: str) -> TextFile:
        url = f"{self._route(instance)}/api/file/text?path={_encode(path)}"
        return _validate(TextFile, await self._dispatcher.get_json(url))

    async def save_text_file(
        self,
        instance: ServiceDescriptor,
        path: str,
        last_update_on: int,
        text: str,
    ) -> SaveFileResponse:
        """Save `text` to `path`.

        `last_update_on` is the modification time the caller last saw; the
        service uses it to refuse overwriting a newer version.
        """
        url = (
            f"{self._route(instance)}/api/file/text"
            f"?lastUpdateOn={last_update_on}&path={_encode(path)}"
        )
        payload = await self._dispatcher.dispatch("POST", url, "text/plain", text)
        return _validate(SaveFileResponse, payload)
