"""Ports consumed by the resolve use case."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from media_resolver.domain.entities import EntityMatch, PlaylistItem


@runtime_checkable
class UrlClassifierPort(Protocol):
    def classify(self, url: str) -> EntityMatch | None:
        """Return the entity a URL points at, or None. Never raises."""
        ...


@runtime_checkable
class ResolutionDispatcherPort(Protocol):
    async def resolve(self, match: EntityMatch) -> list[PlaylistItem]:
        """Resolve a match, raising a ``ResolveError`` subclass on failure."""
        ...
