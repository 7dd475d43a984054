from .errors import (
    BlockedChannelError,
    EntityNotFoundError,
    EntityOfflineError,
    NoMatchError,
    ResolveError,
    ResolveErrorKind,
    TokenDecodeError,
    UnsupportedChannelError,
    UpstreamDecodeError,
    UpstreamHttpError,
)
from .matches import (
    ChannelMatch,
    ChannelVideosMatch,
    ClipMatch,
    EntityMatch,
    VideoMatch,
)
from .playlist import PlaylistItem

__all__ = [
    "BlockedChannelError",
    "ChannelMatch",
    "ChannelVideosMatch",
    "ClipMatch",
    "EntityMatch",
    "EntityNotFoundError",
    "EntityOfflineError",
    "NoMatchError",
    "PlaylistItem",
    "ResolveError",
    "ResolveErrorKind",
    "TokenDecodeError",
    "UnsupportedChannelError",
    "UpstreamDecodeError",
    "UpstreamHttpError",
    "VideoMatch",
]
