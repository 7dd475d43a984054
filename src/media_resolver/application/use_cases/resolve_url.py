"""Resolve use case: classify a URL, then dispatch the match."""

from __future__ import annotations

import structlog

from media_resolver.domain.entities import EntityMatch, NoMatchError, PlaylistItem
from media_resolver.domain.ports import ResolutionDispatcherPort, UrlClassifierPort

log = structlog.get_logger(__name__)


class ResolveUrlUseCase:
    """Turns a media page URL into playlist items.

    Flow:
        1. Classify the URL (no match -> ``NoMatchError``)
        2. Dispatch the match to its resolver
        3. Return the items, or let the ``ResolveError`` propagate
    """

    def __init__(
        self,
        classifier: UrlClassifierPort,
        dispatcher: ResolutionDispatcherPort,
    ) -> None:
        self.classifier = classifier
        self.dispatcher = dispatcher

    def classify(self, url: str) -> EntityMatch | None:
        return self.classifier.classify(url)

    async def execute(self, url: str) -> list[PlaylistItem]:
        match = self.classify(url)
        if match is None:
            log.info("resolve_no_match", url=url)
            raise NoMatchError()

        log.debug("resolve_match", url=url, match=match)
        return await self.dispatcher.resolve(match)
