"""Typed results of URL classification.

One frozen dataclass per resolvable entity. A match is created by the URL
matcher for a single request and consumed once by the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_VIDEO_FILTER = "all"
DEFAULT_VIDEO_SORT = "time"


@dataclass(frozen=True)
class ChannelMatch:
    """Live channel. ``name`` is lower-cased by the matcher."""

    name: str


@dataclass(frozen=True)
class ChannelVideosMatch:
    """Paginated video listing of a channel.

    ``filter`` is usually one of all/archives/highlights/uploads and ``sort``
    one of time/views, but neither is validated: unknown spellings are passed
    on to the backend as-is. ``cursor`` is the opaque pagination token of the
    page to fetch (None for the first page).
    """

    name: str
    filter: str = DEFAULT_VIDEO_FILTER
    sort: str = DEFAULT_VIDEO_SORT
    cursor: str | None = None


@dataclass(frozen=True)
class VideoMatch:
    """Video on demand, ``id`` is always numeric."""

    id: str


@dataclass(frozen=True)
class ClipMatch:
    """Clip, ``slug`` is case-sensitive."""

    slug: str


EntityMatch = Union[ChannelMatch, ChannelVideosMatch, VideoMatch, ClipMatch]
