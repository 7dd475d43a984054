"""Clip resolver.

The clip's access token ``value`` is itself a JSON document carrying the
direct media URI (``clip_uri``). It is decoded in a second, separate step
after the outer response, and the URI becomes the base of the signed path.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from media_resolver.domain.entities import (
    ClipMatch,
    EntityNotFoundError,
    PlaylistItem,
    TokenDecodeError,
)
from media_resolver.infrastructure.twitch.gql_client import TwitchGqlClient
from media_resolver.infrastructure.twitch.helpers import (
    format_date,
    game_name,
    signed_url,
)
from media_resolver.infrastructure.twitch.models import ClipResponse, ClipTokenValue
from media_resolver.infrastructure.twitch.queries import CLIP_QUERY

log = structlog.get_logger(__name__)


def decode_clip_token(value: str) -> ClipTokenValue:
    """Decode the JSON document embedded in a clip access token."""
    try:
        return ClipTokenValue.model_validate_json(value)
    except ValidationError as exc:
        log.error("clip_token_decode_failed", value=value, errors=exc.error_count())
        raise TokenDecodeError() from exc


class ClipResolver:
    def __init__(self, client: TwitchGqlClient) -> None:
        self._client = client

    @property
    def match_type(self) -> type[ClipMatch]:
        return ClipMatch

    async def resolve(self, match: ClipMatch) -> list[PlaylistItem]:
        response = await self._client.query(
            "clip",
            CLIP_QUERY,
            {"slug": match.slug},
            ClipResponse,
        )

        clip = response.data.clip
        if clip is None:
            raise EntityNotFoundError("clip does not exist")

        token = clip.playback_access_token
        token_value = decode_clip_token(token.value)

        return [
            PlaylistItem(
                path=signed_url(token_value.clip_uri, token),
                name=clip.title,
                language=clip.language,
                artist=clip.broadcaster.display_name,
                genre=game_name(clip.game),
                date=format_date(clip.created_at),
                duration=clip.duration_seconds,
            )
        ]
