"""Classifies arbitrary URLs into typed entity matches."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl

import structlog

from media_resolver.domain.entities import (
    ChannelMatch,
    ChannelVideosMatch,
    ClipMatch,
    EntityMatch,
    VideoMatch,
)
from media_resolver.domain.entities.matches import (
    DEFAULT_VIDEO_FILTER,
    DEFAULT_VIDEO_SORT,
)
from media_resolver.infrastructure.twitch.context import TwitchContext

log = structlog.get_logger(__name__)

_SITE = r"https?://(?:www\.|m\.)?twitch\.tv"

# https://clips.twitch.tv/embed?clip=AmazonianKnottyLapwingSwiftRage&parent=example.com
# https://clips.twitch.tv/AmazonianKnottyLapwingSwiftRage
# https://www.twitch.tv/gamesdonequick/clip/ExuberantMiniatureSandpiperDogFace
_CLIP_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^https?://clips\.twitch\.tv/embed\?(?:[^#]*&)?clip=(?P<slug>[^&#]+)"),
    re.compile(r"^https?://clips\.twitch\.tv/(?!embed(?:[/?#]|$))(?P<slug>[^/?#]+)"),
    re.compile(rf"^{_SITE}/[^/?#]+/clip/(?P<slug>[^/?#]+)"),
)

# https://www.twitch.tv/videos/113837699
# https://www.twitch.tv/gamesdonequick/v/113837699 (legacy url)
# https://www.twitch.tv/gamesdonequick/video/113837699 (legacy url)
# https://player.twitch.tv/?video=v113837699&parent=example.com ("v" is optional)
_VIDEO_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^{_SITE}/videos/(?P<video_id>\d+)"),
    re.compile(rf"^{_SITE}/[^/?#]+/v(?:ideo)?/(?P<video_id>\d+)"),
    re.compile(r"^https?://player\.twitch\.tv/[^#]*[?&]video=v?(?P<video_id>\d+)"),
)

# https://www.twitch.tv/speedgaming/videos
# https://www.twitch.tv/speedgaming/videos?filter=archives&sort=views&cursor=...
_CHANNEL_VIDEOS_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"^{_SITE}/(?P<channel_name>[^/?#]+)/videos/?(?:\?(?P<query>[^#]*))?(?:#|$)"
    ),
)

# https://player.twitch.tv/?channel=speedgaming&parent=example.com
# https://www.twitch.tv/speedgaming
_CHANNEL_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^https?://player\.twitch\.tv/[^?#]*\?(?P<query>(?:[^#]*&)?channel=[^&#][^#]*)"
    ),
    re.compile(rf"^{_SITE}/(?P<channel_name>[^/?#]+)"),
)


def _first_match(
    patterns: tuple[re.Pattern[str], ...], url: str
) -> re.Match[str] | None:
    for pattern in patterns:
        m = pattern.match(url)
        if m is not None:
            return m
    return None


def _channel_videos_from(m: re.Match[str]) -> ChannelVideosMatch:
    """Build the listing match, reading filter/sort/cursor in any order."""
    params: dict[str, str] = {}
    for key, value in parse_qsl(m.group("query") or ""):
        if key in ("filter", "sort", "cursor"):
            params.setdefault(key, value)
    return ChannelVideosMatch(
        name=m.group("channel_name"),
        filter=params.get("filter", DEFAULT_VIDEO_FILTER),
        sort=params.get("sort", DEFAULT_VIDEO_SORT),
        cursor=params.get("cursor"),
    )


def _channel_from(m: re.Match[str]) -> ChannelMatch:
    """Build the channel match; player URLs carry the name percent-encoded."""
    query = m.groupdict().get("query")
    if query is None:
        return ChannelMatch(name=m.group("channel_name").lower())
    name = next(value for key, value in parse_qsl(query) if key == "channel")
    return ChannelMatch(name=name.lower())


class UrlMatcher:
    """Turns a raw URL into an ``EntityMatch``.

    Classes are tried in the order clip, video, channel videos, channel;
    the first structural match wins. The channel-root pattern is a prefix
    of all the others, so it has to come last.

    Without a configured client id nothing matches.
    """

    def __init__(self, context: TwitchContext) -> None:
        self._context = context

    def classify(self, url: str) -> EntityMatch | None:
        if not self._context.has_credentials:
            return None

        m = _first_match(_CLIP_URL_PATTERNS, url)
        if m is not None:
            return ClipMatch(slug=m.group("slug"))

        m = _first_match(_VIDEO_URL_PATTERNS, url)
        if m is not None:
            return VideoMatch(id=m.group("video_id"))

        m = _first_match(_CHANNEL_VIDEOS_URL_PATTERNS, url)
        if m is not None:
            return _channel_videos_from(m)

        m = _first_match(_CHANNEL_URL_PATTERNS, url)
        if m is not None:
            return _channel_from(m)

        log.debug("url_not_matched", url=url)
        return None
