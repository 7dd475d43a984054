"""Channel video listing resolver with cursor-based pagination."""

from __future__ import annotations

import structlog

from media_resolver.domain.entities import (
    ChannelVideosMatch,
    EntityNotFoundError,
    PlaylistItem,
)
from media_resolver.infrastructure.twitch.gql_client import TwitchGqlClient
from media_resolver.infrastructure.twitch.helpers import (
    LOAD_MORE_TITLE,
    channel_videos_url,
    format_date,
    game_name,
    video_page_url,
)
from media_resolver.infrastructure.twitch.models import (
    ChannelVideosResponse,
    ListedVideo,
)
from media_resolver.infrastructure.twitch.queries import CHANNEL_VIDEOS_QUERY

log = structlog.get_logger(__name__)


def video_type_for(video_filter: str) -> str | None:
    """Map a listing filter to the backend's broadcast type.

    ``all`` means no type. Everything else is upper-cased and loses its last
    character, the plural "s": archives -> ARCHIVE, highlights -> HIGHLIGHT,
    uploads -> UPLOAD. The result is not checked against the backend enum,
    so an unknown filter yields an unknown type instead of an error.
    """
    if video_filter.lower() == "all":
        return None
    return video_filter.upper()[:-1]


def video_sort_for(sort: str) -> str:
    """time -> TIME, views -> VIEWS."""
    return sort.upper()


class ChannelVideosResolver:
    """Lists a channel's videos, one item per video page URL.

    The items point at video pages, not manifests; following one of them
    goes through the video resolver. When the backend reports another page,
    a trailing "Load more" item links to the same listing at the cursor of
    the last edge.
    """

    def __init__(self, client: TwitchGqlClient, page_size: int = 30) -> None:
        self._client = client
        self._page_size = page_size

    @property
    def match_type(self) -> type[ChannelVideosMatch]:
        return ChannelVideosMatch

    async def resolve(self, match: ChannelVideosMatch) -> list[PlaylistItem]:
        response = await self._client.query(
            "channel_videos",
            CHANNEL_VIDEOS_QUERY,
            {
                "channelName": match.name.lower(),
                "first": self._page_size,
                "after": match.cursor,
                "type": video_type_for(match.filter),
                "sort": video_sort_for(match.sort),
            },
            ChannelVideosResponse,
        )

        user = response.data.user
        if user is None:
            raise EntityNotFoundError("channel does not exist")

        connection = user.videos
        edges = connection.edges if connection is not None else []
        items = [
            self._to_item(edge.node, user.display_name)
            for edge in edges
            if edge.node is not None
        ]

        last_cursor = edges[-1].cursor if edges else None
        if connection is not None and connection.page_info.has_next_page:
            if last_cursor:
                items.append(
                    PlaylistItem(
                        path=channel_videos_url(
                            match.name, match.filter, match.sort, last_cursor
                        ),
                        name=LOAD_MORE_TITLE,
                    )
                )
            else:
                log.warning("channel_videos_missing_cursor", channel=match.name)

        if not items:
            raise EntityNotFoundError("channel has no videos")

        log.debug(
            "channel_videos_resolved",
            channel=match.name,
            count=len(items),
            cursor=match.cursor,
        )
        return items

    @staticmethod
    def _to_item(video: ListedVideo, channel_display_name: str) -> PlaylistItem:
        return PlaylistItem(
            path=video_page_url(video.id),
            name=video.title,
            language=video.language,
            artist=channel_display_name,
            genre=game_name(video.game),
            date=format_date(video.published_at) if video.published_at else None,
            duration=video.length_seconds,
        )
