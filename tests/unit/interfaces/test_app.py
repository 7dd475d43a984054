"""Tests for the application factory and lifespan wiring."""

from __future__ import annotations

from fastapi.testclient import TestClient

from media_resolver.application.use_cases import ResolveUrlUseCase
from media_resolver.infrastructure.config import AppConfig, TwitchConfig
from media_resolver.interfaces.app import create_app


class TestCreateApp:
    def test_healthz_with_credentials(self) -> None:
        config = AppConfig(twitch=TwitchConfig(client_id="abc"))

        with TestClient(create_app(config)) as client:
            resp = client.get("/healthz")

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["credentials"] is True
        assert len(body["entities"]) == 4

    def test_lifespan_wires_use_case(self) -> None:
        app = create_app(AppConfig(twitch=TwitchConfig(client_id="abc")))

        with TestClient(app):
            assert isinstance(app.state.resolve_uc, ResolveUrlUseCase)
            assert app.state.twitch_context.client_id == "abc"

    def test_without_credentials_nothing_matches(self) -> None:
        app = create_app(AppConfig())

        with TestClient(app) as client:
            health = client.get("/healthz").json()
            resp = client.get(
                "/resolve",
                params={"url": "https://www.twitch.tv/speedgaming"},
                follow_redirects=False,
            )

        assert health["credentials"] is False
        assert resp.status_code == 404
