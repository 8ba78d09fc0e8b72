"""Async gateway client: authenticated request dispatch and service resolution.

Keeps the package importable and exposes the pieces most callers need.
"""
from importlib.metadata import PackageNotFoundError, version

from fsclient.client import FsClient
from fsclient.domain.services import ServiceDescriptor
from fsclient.domain.urls import host_url, ip_url
from fsclient.settings import ClientSettings
from fsclient.types import (
    AuthFailureError,
    ClientError,
    HttpFailureError,
    RegistryParseError,
    UnexpectedPayloadError,
)

try:  # Resolves once installed; else default.
    __version__ = version("fsclient")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "AuthFailureError",
    "ClientError",
    "ClientSettings",
    "FsClient",
    "HttpFailureError",
    "RegistryParseError",
    "ServiceDescriptor",
    "UnexpectedPayloadError",
    "host_url",
    "ip_url",
]
