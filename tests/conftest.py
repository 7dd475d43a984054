"""Shared test fixtures for the media-resolver test suite."""

from __future__ import annotations

import pytest

from media_resolver.domain.entities import PlaylistItem
from media_resolver.infrastructure.twitch import TwitchContext

GQL_URL = "https://gql.twitch.tv/gql"
CLIENT_ID = "test-client-id"


# ---------------------------------------------------------------------------
# Context fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def twitch_context() -> TwitchContext:
    """Context with credentials, a small page size and the default policy."""
    return TwitchContext(
        client_id=CLIENT_ID,
        gql_url=GQL_URL,
        blocked_channels=frozenset({"kaicenat"}),
        reserved_names=frozenset({"directory", "recaps"}),
        page_size=2,
    )


@pytest.fixture()
def anonymous_context() -> TwitchContext:
    """Context without a client id."""
    return TwitchContext(client_id=None)


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def playlist_item() -> PlaylistItem:
    return PlaylistItem(
        path="https://usher.ttvnw.net/vod/113837699.m3u8?sig=a&token=b",
        name="AGDQ 2017",
        description="Games Done Quick",
        language="en",
        artist="GamesDoneQuick",
        genre="Super Metroid",
        date="2017-01-08 18:00:00",
        duration=4800,
    )
