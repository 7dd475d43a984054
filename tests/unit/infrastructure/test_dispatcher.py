"""Tests for ResolutionDispatcher routing and channel policy."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from media_resolver.domain.entities import (
    BlockedChannelError,
    ChannelMatch,
    ChannelVideosMatch,
    ClipMatch,
    NoMatchError,
    PlaylistItem,
    UnsupportedChannelError,
    VideoMatch,
)
from media_resolver.infrastructure.http import HttpxGraphQLTransport
from media_resolver.infrastructure.twitch import (
    ResolutionDispatcher,
    TwitchContext,
    create_dispatcher,
)

_ITEM = PlaylistItem(path="https://example.com/x.m3u8", name="x")


class _FakeResolver:
    def __init__(self, match_type: type) -> None:
        self._match_type = match_type
        self.resolve = AsyncMock(return_value=[_ITEM])

    @property
    def match_type(self) -> type:
        return self._match_type


@pytest.fixture()
def resolvers() -> dict[type, _FakeResolver]:
    return {
        match_type: _FakeResolver(match_type)
        for match_type in (ChannelMatch, ChannelVideosMatch, VideoMatch, ClipMatch)
    }


@pytest.fixture()
def dispatcher(
    twitch_context: TwitchContext, resolvers: dict[type, _FakeResolver]
) -> ResolutionDispatcher:
    return ResolutionDispatcher(twitch_context, resolvers=list(resolvers.values()))


class TestRouting:
    @pytest.mark.asyncio()
    @pytest.mark.parametrize(
        "match",
        [
            ChannelMatch(name="speedgaming"),
            ChannelVideosMatch(name="speedgaming"),
            VideoMatch(id="1"),
            ClipMatch(slug="Slug"),
        ],
    )
    async def test_routes_by_match_type(
        self,
        dispatcher: ResolutionDispatcher,
        resolvers: dict[type, _FakeResolver],
        match: object,
    ) -> None:
        items = await dispatcher.resolve(match)  # type: ignore[arg-type]

        assert items == [_ITEM]
        resolvers[type(match)].resolve.assert_awaited_once_with(match)
        for match_type, resolver in resolvers.items():
            if match_type is not type(match):
                resolver.resolve.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_missing_resolver(self, twitch_context: TwitchContext) -> None:
        dispatcher = ResolutionDispatcher(twitch_context)
        with pytest.raises(NoMatchError):
            await dispatcher.resolve(VideoMatch(id="1"))


class TestPolicy:
    @pytest.mark.asyncio()
    async def test_blocked_channel(
        self,
        dispatcher: ResolutionDispatcher,
        resolvers: dict[type, _FakeResolver],
    ) -> None:
        with pytest.raises(BlockedChannelError):
            await dispatcher.resolve(ChannelMatch(name="kaicenat"))
        resolvers[ChannelMatch].resolve.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_blocked_channel_listing_any_case(
        self,
        dispatcher: ResolutionDispatcher,
        resolvers: dict[type, _FakeResolver],
    ) -> None:
        with pytest.raises(BlockedChannelError):
            await dispatcher.resolve(ChannelVideosMatch(name="KaiCenat"))
        resolvers[ChannelVideosMatch].resolve.assert_not_awaited()

    @pytest.mark.asyncio()
    @pytest.mark.parametrize("name", ["directory", "recaps"])
    async def test_reserved_names(
        self,
        dispatcher: ResolutionDispatcher,
        resolvers: dict[type, _FakeResolver],
        name: str,
    ) -> None:
        with pytest.raises(UnsupportedChannelError):
            await dispatcher.resolve(ChannelMatch(name=name))
        resolvers[ChannelMatch].resolve.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_policy_ignores_videos_and_clips(
        self, dispatcher: ResolutionDispatcher
    ) -> None:
        assert await dispatcher.resolve(ClipMatch(slug="directory")) == [_ITEM]

    def test_check_policy_passes_regular_channel(
        self, dispatcher: ResolutionDispatcher
    ) -> None:
        dispatcher.check_policy(ChannelMatch(name="speedgaming"))


class TestCreateDispatcher:
    def test_registers_all_entities(self, twitch_context: TwitchContext) -> None:
        transport = HttpxGraphQLTransport(httpx.AsyncClient())
        dispatcher = create_dispatcher(transport, twitch_context)
        assert sorted(dispatcher.supported_entities) == [
            "ChannelMatch",
            "ChannelVideosMatch",
            "ClipMatch",
            "VideoMatch",
        ]
