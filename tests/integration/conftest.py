"""Shared fixtures for integration tests.

These tests wire real components (load_config, UrlMatcher, the dispatcher,
HttpxGraphQLTransport) and mock only the network via respx.
"""

from __future__ import annotations

import os

import pytest

_ENV_PREFIXES = ("MEDIA_RESOLVER_", "TWITCH_CLIENT_ID")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of config loading."""
    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)
