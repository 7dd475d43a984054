"""Entity resolvers: one backend query and response mapping per entity type."""

from __future__ import annotations

from .channel import ChannelResolver
from .channel_videos import ChannelVideosResolver
from .clip import ClipResolver
from .video import VideoResolver

__all__ = [
    "ChannelResolver",
    "ChannelVideosResolver",
    "ClipResolver",
    "VideoResolver",
]
