"""Gateway routing prefixes for a resolved service instance.

The gateway forwards `/<service_class>/<host-or-ip>/<port>/...` to that exact
instance. Fields are not validated; a bad descriptor gives a bad but
well-defined prefix.
"""
from __future__ import annotations

from fsclient.domain.services import ServiceDescriptor

__all__ = ["host_url", "ip_url"]


def host_url(service: ServiceDescriptor) -> str:
    """Prefix routed by hostname and port."""
    return f"/{service.service_class}/{service.host}/{service.port}"


def ip_url(service: ServiceDescriptor) -> str:
    """Prefix routed by IP address and port."""
    return f"/{service.service_class}/{service.ip}/{service.port}"
