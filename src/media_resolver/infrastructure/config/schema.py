"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]

# Pseudo-channels that are really platform navigation pages, e.g.
# https://www.twitch.tv/directory/game/Perfect%20Dark
# https://www.twitch.tv/recaps/annual
DEFAULT_RESERVED_NAMES: list[str] = [
    "directory",
    "recaps",
    "downloads",
    "inventory",
    "search",
    "settings",
    "subscriptions",
    "videos",
    "wallet",
]

# Channels too popular to be proxied through this service.
DEFAULT_BLOCKED_CHANNELS: list[str] = ["kaicenat"]


def _lower_names(value: list[str]) -> list[str]:
    return [name.strip().lower() for name in value if name.strip()]


class TwitchConfig(BaseModel):
    """Backend access and resolution policy.

    All values configurable via YAML (twitch section) or ENV vars.
    """

    client_id: str | None = Field(
        default=None,
        description=(
            "Client-ID sent to the GraphQL backend. "
            "Without it no URL is matched."
        ),
    )
    gql_url: str = Field(
        default="https://gql.twitch.tv/gql",
        description="GraphQL endpoint.",
    )
    blocked_channels: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BLOCKED_CHANNELS),
        description="Channel names rejected before any backend call.",
    )
    reserved_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RESERVED_NAMES),
        description="Path segments that look like channels but are not.",
    )
    page_size: int = Field(
        default=30,
        description="Number of videos fetched per channel listing page.",
    )

    @field_validator("client_id")
    @classmethod
    def _blank_client_id(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("blocked_channels", "reserved_names")
    @classmethod
    def _normalize_names(cls, v: list[str]) -> list[str]:
        return _lower_names(v)

    @field_validator("page_size")
    @classmethod
    def _validate_page_size(cls, v: int) -> int:
        if not 1 <= v <= 100:
            raise ValueError("page_size must be between 1 and 100")
        return v


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (server/http/logging/twitch).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="media-resolver", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Server (YAML section: server.*)
    host: str = Field(
        default="127.0.0.1",
        validation_alias=AliasChoices("host", AliasPath("server", "host")),
        description="Bind host.",
    )
    port: int = Field(
        default=8080,
        validation_alias=AliasChoices("port", AliasPath("server", "port")),
        description="Bind port.",
    )

    # HTTP (YAML section: http.*)
    http_user_agent: str = Field(
        default="media-resolver/0.1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Backend (YAML section: twitch.*)
    twitch: TwitchConfig = Field(default_factory=TwitchConfig)

    @field_validator("port")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "server": {"host": self.host, "port": self.port},
            "http": {"user_agent": self.http_user_agent},
            "logging": {"level": self.log_level, "format": self.log_format},
            "twitch": self.twitch.model_dump(),
        }


def _drop_unset(layer: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in layer.items():
        if isinstance(value, dict):
            value = _drop_unset(value)
            if not value:
                continue
        elif value is None:
            continue
        out[key] = value
    return out


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env var examples (flat, explicit):
    - MEDIA_RESOLVER_HOST / MEDIA_RESOLVER_PORT
    - MEDIA_RESOLVER_LOG_LEVEL
    - MEDIA_RESOLVER_TWITCH_CLIENT_ID (or plain TWITCH_CLIENT_ID)
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_RESOLVER_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    host: Optional[str] = None
    port: Optional[int] = None

    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    twitch_client_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "media_resolver_twitch_client_id",
            "twitch_client_id",
        ),
    )
    twitch_gql_url: Optional[str] = None
    twitch_page_size: Optional[int] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Provided values only, in the sectioned shape load_config merges.
        """
        layer: dict[str, Any] = {
            "app_name": self.app_name,
            "environment": self.environment,
            "server": {"host": self.host, "port": self.port},
            "http": {"user_agent": self.http_user_agent},
            "logging": {"level": self.log_level, "format": self.log_format},
            "twitch": {
                "client_id": self.twitch_client_id,
                "gql_url": self.twitch_gql_url,
                "page_size": self.twitch_page_size,
            },
        }
        return _drop_unset(layer)
