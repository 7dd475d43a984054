"""Shared building blocks for mapping backend responses to playlist items."""

from __future__ import annotations

from urllib.parse import quote

from media_resolver.infrastructure.twitch.models import Game, PlaybackAccessToken

USHER_BASE = "https://usher.ttvnw.net"
SITE_BASE = "https://www.twitch.tv"

LOAD_MORE_TITLE = "Load more"


def format_date(timestamp: str) -> str:
    """``"2024-01-31T18:00:00Z"`` -> ``"2024-01-31 18:00:00"``.

    Plain text substitution, no timezone handling.
    """
    return timestamp.replace("T", " ").replace("Z", "")


def game_name(game: Game | None) -> str | None:
    return game.display_name if game is not None else None


def signed_url(base: str, token: PlaybackAccessToken) -> str:
    """Append the playback flags plus the percent-encoded sig/token pair."""
    separator = "&" if "?" in base else "?"
    return (
        f"{base}{separator}allow_source=true&allow_audio_only=true"
        f"&sig={quote(token.signature, safe='')}"
        f"&token={quote(token.value, safe='')}"
    )


def channel_manifest_url(channel_name: str, token: PlaybackAccessToken) -> str:
    return signed_url(f"{USHER_BASE}/api/channel/hls/{channel_name}.m3u8", token)


def video_manifest_url(video_id: str, token: PlaybackAccessToken) -> str:
    return signed_url(f"{USHER_BASE}/vod/{video_id}.m3u8", token)


def video_page_url(video_id: str) -> str:
    return f"{SITE_BASE}/videos/{video_id}"


def channel_videos_url(
    channel_name: str, video_filter: str, sort: str, cursor: str | None = None
) -> str:
    """Listing URL that classifies back into the same ChannelVideos match."""
    url = (
        f"{SITE_BASE}/{quote(channel_name, safe='')}/videos"
        f"?filter={quote(video_filter, safe='')}&sort={quote(sort, safe='')}"
    )
    if cursor:
        url += f"&cursor={quote(cursor, safe='')}"
    return url
