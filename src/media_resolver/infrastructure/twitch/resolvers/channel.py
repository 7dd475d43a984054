"""Live channel resolver: HLS manifest of the running stream."""

from __future__ import annotations

import structlog

from media_resolver.domain.entities import (
    ChannelMatch,
    EntityNotFoundError,
    EntityOfflineError,
    PlaylistItem,
)
from media_resolver.infrastructure.twitch.gql_client import TwitchGqlClient
from media_resolver.infrastructure.twitch.helpers import (
    channel_manifest_url,
    format_date,
    game_name,
)
from media_resolver.infrastructure.twitch.models import ChannelResponse
from media_resolver.infrastructure.twitch.queries import CHANNEL_QUERY

log = structlog.get_logger(__name__)


class ChannelResolver:
    """Resolves a live channel to a single manifest item (no duration)."""

    def __init__(self, client: TwitchGqlClient) -> None:
        self._client = client

    @property
    def match_type(self) -> type[ChannelMatch]:
        return ChannelMatch

    async def resolve(self, match: ChannelMatch) -> list[PlaylistItem]:
        channel_name = match.name.lower()
        response = await self._client.query(
            "channel",
            CHANNEL_QUERY,
            {"channelName": channel_name},
            ChannelResponse,
        )

        channel = response.data.channel
        if channel is None:
            raise EntityNotFoundError("channel does not exist")
        stream = channel.stream
        if stream is None:
            log.info("channel_offline", channel=channel_name)
            raise EntityOfflineError("channel is not live")

        return [
            PlaylistItem(
                path=channel_manifest_url(channel_name, stream.playback_access_token),
                name=stream.title,
                language=stream.language,
                artist=channel.display_name,
                genre=game_name(stream.game),
                date=format_date(stream.created_at),
            )
        ]
