"""Port for resolving a classified entity into playlist items."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from media_resolver.domain.entities import EntityMatch, PlaylistItem


@runtime_checkable
class EntityResolverPort(Protocol):
    """Resolves one kind of ``EntityMatch`` with exactly one backend call.

    Implementations raise a ``ResolveError`` subclass on failure and never
    return an empty list.
    """

    @property
    def match_type(self) -> type:
        """The EntityMatch variant this resolver handles."""
        ...

    async def resolve(self, match: EntityMatch) -> list[PlaylistItem]: ...
