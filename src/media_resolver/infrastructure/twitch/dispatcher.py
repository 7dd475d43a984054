"""Routes entity matches to their resolvers and applies channel policy."""

from __future__ import annotations

import structlog

from media_resolver.domain.entities import (
    BlockedChannelError,
    ChannelMatch,
    ChannelVideosMatch,
    EntityMatch,
    NoMatchError,
    PlaylistItem,
    UnsupportedChannelError,
)
from media_resolver.domain.ports.entity_resolver import EntityResolverPort
from media_resolver.domain.ports.graphql_transport import GraphQLTransportPort
from media_resolver.infrastructure.twitch.context import TwitchContext
from media_resolver.infrastructure.twitch.gql_client import TwitchGqlClient
from media_resolver.infrastructure.twitch.resolvers import (
    ChannelResolver,
    ChannelVideosResolver,
    ClipResolver,
    VideoResolver,
)

log = structlog.get_logger(__name__)


class ResolutionDispatcher:
    """Dispatches a match to the resolver registered for its type.

    Channel-named matches are checked against the blocked and reserved
    name sets first; a rejected name never reaches the backend.
    """

    def __init__(
        self,
        context: TwitchContext,
        resolvers: list[EntityResolverPort] | None = None,
    ) -> None:
        self._context = context
        self._resolvers: dict[type, EntityResolverPort] = {}
        for resolver in resolvers or []:
            self.register(resolver)

    def register(self, resolver: EntityResolverPort) -> None:
        self._resolvers[resolver.match_type] = resolver
        log.debug("entity_resolver_registered", entity=resolver.match_type.__name__)

    @property
    def supported_entities(self) -> list[str]:
        return [match_type.__name__ for match_type in self._resolvers]

    def check_policy(self, match: EntityMatch) -> None:
        """Raise if ``match`` names a blocked or reserved channel."""
        if not isinstance(match, (ChannelMatch, ChannelVideosMatch)):
            return
        name = match.name.lower()
        if name in self._context.blocked_channels:
            log.warning("channel_blocked", channel=name)
            raise BlockedChannelError(name)
        if name in self._context.reserved_names:
            log.info("channel_unsupported", channel=name)
            raise UnsupportedChannelError(name)

    async def resolve(self, match: EntityMatch) -> list[PlaylistItem]:
        self.check_policy(match)

        resolver = self._resolvers.get(type(match))
        if resolver is None:
            log.error("entity_resolver_missing", entity=type(match).__name__)
            raise NoMatchError(f"no resolver for {type(match).__name__}")

        items = await resolver.resolve(match)
        log.info(
            "entity_resolved",
            entity=type(match).__name__,
            items=len(items),
        )
        return items


def create_dispatcher(
    transport: GraphQLTransportPort, context: TwitchContext
) -> ResolutionDispatcher:
    """Wire the four entity resolvers onto one GraphQL client."""
    client = TwitchGqlClient(transport, context)
    return ResolutionDispatcher(
        context,
        resolvers=[
            ClipResolver(client),
            VideoResolver(client),
            ChannelVideosResolver(client, page_size=context.page_size),
            ChannelResolver(client),
        ],
    )
