from __future__ import annotations

from fsclient.dispatch import Dispatcher
from fsclient.domain.services import ServiceDescriptor, parse_registry_document
from fsclient.logging_conf import get_logger
from fsclient.settings import DEFAULT_REGISTRY_BASE
from fsclient.types import RegistryParseError

__all__ = ["RegistryResolver"]

logger = get_logger("fsclient.registry")


class RegistryResolver:
    """Resolves a service class to its live instances via the registry feed."""

    def __init__(self, dispatcher: Dispatcher, *, registry_base: str = DEFAULT_REGISTRY_BASE) -> None:
        self._dispatcher = dispatcher
        self._registry_base = registry_base.rstrip("/")

    async def resolve_services(self, service_class: str) -> list[ServiceDescriptor]:
        """Fetch and parse the registry document for `service_class`.

        Every call re-fetches; results are not cached and nothing is retried.

        Raises:
            RegistryParseError: if the feed is not an XML document or an
                instance lacks ip, host or port.
            HttpFailureError: if the registry answered with a non-2xx status.
        """
        document = await self._dispatcher.get_json(f"{self._registry_base}/{service_class}")
        if not isinstance(document, str):
            raise RegistryParseError(
                f"registry answered {service_class!r} with JSON, expected an XML document"
            )
        services = parse_registry_document(service_class, document)
        logger.info(
            "registry.resolved",
            extra={
                "event": "registry_resolved",
                "service_class": service_class,
                "count": len(services),
            },
        )
        return services
