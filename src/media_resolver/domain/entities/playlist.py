"""Playlist record returned by every resolution.

Pure value object, no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PlaylistItem:
    """A single entry of a resolved playlist.

    ``path`` is either a directly fetchable media URL (manifest or clip file
    with the access token embedded) or, for the "Load more" entry of a channel
    video listing, a continuation URL that resolves to the next page.
    """

    path: str
    name: str
    description: str | None = None
    language: str | None = None
    artist: str | None = None  # channel / owner / broadcaster display name
    genre: str | None = None  # game / category display name
    date: str | None = None  # "2024-01-31 18:00:00"
    duration: int | None = None  # seconds

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
