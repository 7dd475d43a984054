"""Video-on-demand resolver."""

from __future__ import annotations

from media_resolver.domain.entities import (
    EntityNotFoundError,
    PlaylistItem,
    VideoMatch,
)
from media_resolver.infrastructure.twitch.duration import parse_duration
from media_resolver.infrastructure.twitch.gql_client import TwitchGqlClient
from media_resolver.infrastructure.twitch.helpers import (
    format_date,
    game_name,
    video_manifest_url,
)
from media_resolver.infrastructure.twitch.models import VideoResponse
from media_resolver.infrastructure.twitch.queries import VIDEO_QUERY


class VideoResolver:
    def __init__(self, client: TwitchGqlClient) -> None:
        self._client = client

    @property
    def match_type(self) -> type[VideoMatch]:
        return VideoMatch

    async def resolve(self, match: VideoMatch) -> list[PlaylistItem]:
        response = await self._client.query(
            "video",
            VIDEO_QUERY,
            {"vodID": match.id},
            VideoResponse,
        )

        video = response.data.video
        if video is None:
            raise EntityNotFoundError("video does not exist")

        return [
            PlaylistItem(
                path=video_manifest_url(match.id, video.playback_access_token),
                name=video.title,
                description=video.description,
                language=video.language,
                artist=video.owner.display_name,
                genre=game_name(video.game),
                date=format_date(video.recorded_at),
                duration=parse_duration(video.duration),
            )
        ]
