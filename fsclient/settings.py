"""Client configuration read from the environment.

All knobs are optional; the defaults match the gateway layout the client was
written against (Eureka registry behind `/discoveryservice`).
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "JSON_CONTENT_TYPE",
    "DEFAULT_TOKEN_NAME",
    "DEFAULT_REGISTRY_BASE",
    "ClientSettings",
]

JSON_CONTENT_TYPE = "application/json"
DEFAULT_TOKEN_NAME = "fstoken"
DEFAULT_REGISTRY_BASE = "/discoveryservice/eureka/apps"


class ClientSettings(BaseSettings):
    """Validated client settings, from FSCLIENT_* variables or keyword args.

    `token_name` doubles as the cookie key the token is read from and the
    request header it is sent under.
    """

    model_config = SettingsConfigDict(
        env_prefix="FSCLIENT_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    base_url: str = ""
    token_name: str = Field(default=DEFAULT_TOKEN_NAME, min_length=1)
    registry_base: str = DEFAULT_REGISTRY_BASE
    # Env names are shorter than the field names; aliases bypass env_prefix.
    session_expiry_delay_s: float = Field(
        default=0.5,
        ge=0,
        validation_alias="FSCLIENT_SESSION_EXPIRY_DELAY",
    )
    timeout_s: float = Field(
        default=30.0,
        gt=0,
        validation_alias="FSCLIENT_TIMEOUT",
    )
    token_file: Path | None = None

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from the environment alone.

        Raises pydantic.ValidationError (a ValueError) on malformed values.
        """
        return cls()
