"""Tests for the environment layer of the configuration."""

from __future__ import annotations

import pytest

from media_resolver.infrastructure.config import EnvOverrides


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TWITCH_CLIENT_ID",
        "MEDIA_RESOLVER_TWITCH_CLIENT_ID",
        "MEDIA_RESOLVER_HOST",
        "MEDIA_RESOLVER_PORT",
        "MEDIA_RESOLVER_LOG_LEVEL",
        "MEDIA_RESOLVER_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestToUpdateDict:
    def test_nothing_set(self) -> None:
        assert EnvOverrides().to_update_dict() == {}

    def test_values_land_in_their_sections(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MEDIA_RESOLVER_PORT", "9001")
        monkeypatch.setenv("MEDIA_RESOLVER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TWITCH_CLIENT_ID", "abc")
        monkeypatch.setenv("MEDIA_RESOLVER_ENVIRONMENT", "prod")

        assert EnvOverrides().to_update_dict() == {
            "environment": "prod",
            "server": {"port": 9001},
            "logging": {"level": "DEBUG"},
            "twitch": {"client_id": "abc"},
        }
