from __future__ import annotations

import xml.etree.ElementTree as ET

from pydantic import BaseModel, ConfigDict

from fsclient.types import RegistryParseError

__all__ = [
    "ServiceDescriptor",
    "parse_registry_document",
]


class ServiceDescriptor(BaseModel):
    """One live instance of a service class as advertised by the registry."""

    model_config = ConfigDict(frozen=True)

    service_class: str
    name: str | None = None  # from <metadata><name>, optional per instance
    ip: str
    host: str | None = None
    port: str


def _required_text(instance: ET.Element, tag: str, index: int) -> str:
    el = instance.find(tag)
    if el is None or not (el.text or "").strip():
        raise RegistryParseError(f"instance #{index} is missing <{tag}>")
    return el.text.strip()


def _optional_text(instance: ET.Element, path: str) -> str | None:
    el = instance.find(path)
    if el is None or el.text is None:
        return None
    text = el.text.strip()
    return text or None


def parse_registry_document(service_class: str, document: str) -> list[ServiceDescriptor]:
    """Parse a registry XML document into descriptors, in document order.

    Every `instance` element below the root counts, however deeply nested;
    a root that is itself `<instance>` does not.
    `ipAddr`, `hostName` and `port` are required; `metadata/name` is not.

    Raises:
        RegistryParseError: if the text is not well-formed XML or an instance
            lacks a required field. Nothing partial is returned.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise RegistryParseError(f"registry document for {service_class!r} is not valid XML: {e}") from e

    out: list[ServiceDescriptor] = []
    for index, instance in enumerate(root.iterfind(".//instance")):
        out.append(
            ServiceDescriptor(
                service_class=service_class,
                name=_optional_text(instance, "metadata/name"),
                ip=_required_text(instance, "ipAddr", index),
                host=_required_text(instance, "hostName", index),
                port=_required_text(instance, "port", index),
            )
        )
    return out
