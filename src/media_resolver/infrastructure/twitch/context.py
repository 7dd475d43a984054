"""Immutable runtime context shared by matcher, client and dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field

from media_resolver.infrastructure.config.schema import AppConfig

DEFAULT_GQL_URL = "https://gql.twitch.tv/gql"


@dataclass(frozen=True)
class TwitchContext:
    """Built once at startup from ``AppConfig`` and injected everywhere."""

    client_id: str | None
    gql_url: str = DEFAULT_GQL_URL
    blocked_channels: frozenset[str] = field(default_factory=frozenset)
    reserved_names: frozenset[str] = field(default_factory=frozenset)
    page_size: int = 30

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id)

    @classmethod
    def from_config(cls, config: AppConfig) -> TwitchContext:
        twitch = config.twitch
        return cls(
            client_id=twitch.client_id,
            gql_url=twitch.gql_url,
            blocked_channels=frozenset(twitch.blocked_channels),
            reserved_names=frozenset(twitch.reserved_names),
            page_size=twitch.page_size,
        )
