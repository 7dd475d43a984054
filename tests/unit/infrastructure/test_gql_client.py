"""Tests for TwitchGqlClient and HttpxGraphQLTransport."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from media_resolver.domain.entities import UpstreamDecodeError, UpstreamHttpError
from media_resolver.infrastructure.http import HttpxGraphQLTransport
from media_resolver.infrastructure.twitch import TwitchContext
from media_resolver.infrastructure.twitch.gql_client import TwitchGqlClient
from media_resolver.infrastructure.twitch.models import VideoResponse

_GQL_URL = "https://gql.twitch.tv/gql"


class TestHttpxGraphQLTransport:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_returns_status_and_body(self) -> None:
        route = respx.post(_GQL_URL).respond(418, text="teapot")

        async with httpx.AsyncClient() as client:
            resp = await HttpxGraphQLTransport(client).post(
                _GQL_URL, headers={"Client-ID": "abc"}, payload={"query": "q"}
            )

        assert resp.status_code == 418
        assert resp.body == b"teapot"
        assert resp.text == "teapot"
        request = route.calls.last.request
        assert request.headers["Client-ID"] == "abc"
        assert json.loads(request.content) == {"query": "q"}

    @respx.mock
    @pytest.mark.asyncio()
    async def test_network_error_raises_upstream_error(self) -> None:
        respx.post(_GQL_URL).mock(side_effect=httpx.ConnectError("refused"))

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamHttpError) as exc_info:
                await HttpxGraphQLTransport(client).post(
                    _GQL_URL, headers={}, payload={}
                )
        assert exc_info.value.status_code is None


class TestTwitchGqlClient:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_adds_player_variables_and_client_id(
        self, twitch_context: TwitchContext
    ) -> None:
        route = respx.post(_GQL_URL).respond(200, json={"data": {"video": None}})

        async with httpx.AsyncClient() as client:
            gql = TwitchGqlClient(HttpxGraphQLTransport(client), twitch_context)
            result = await gql.query("video", "query {}", {"vodID": "1"}, VideoResponse)

        assert result.data.video is None
        request = route.calls.last.request
        assert request.headers["Client-ID"] == "test-client-id"
        body = json.loads(request.content)
        assert body["query"] == "query {}"
        assert body["variables"] == {
            "vodID": "1",
            "platform": "web",
            "playerType": "site",
        }

    @respx.mock
    @pytest.mark.asyncio()
    async def test_non_200_is_upstream_error_regardless_of_body(
        self, twitch_context: TwitchContext
    ) -> None:
        respx.post(_GQL_URL).respond(500, json={"data": {"video": None}})

        async with httpx.AsyncClient() as client:
            gql = TwitchGqlClient(HttpxGraphQLTransport(client), twitch_context)
            with pytest.raises(UpstreamHttpError) as exc_info:
                await gql.query("video", "query {}", {}, VideoResponse)

        assert exc_info.value.status_code == 500
        assert "video" in exc_info.value.body

    @respx.mock
    @pytest.mark.asyncio()
    async def test_invalid_json_is_decode_error(
        self, twitch_context: TwitchContext
    ) -> None:
        respx.post(_GQL_URL).respond(200, text="<html>maintenance</html>")

        async with httpx.AsyncClient() as client:
            gql = TwitchGqlClient(HttpxGraphQLTransport(client), twitch_context)
            with pytest.raises(UpstreamDecodeError) as exc_info:
                await gql.query("video", "query {}", {}, VideoResponse)

        assert exc_info.value.body == "<html>maintenance</html>"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_graphql_errors_without_data_is_decode_error(
        self, twitch_context: TwitchContext
    ) -> None:
        respx.post(_GQL_URL).respond(
            200,
            json={"errors": [{"message": "service timeout"}], "data": None},
        )

        async with httpx.AsyncClient() as client:
            gql = TwitchGqlClient(HttpxGraphQLTransport(client), twitch_context)
            with pytest.raises(UpstreamDecodeError):
                await gql.query("video", "query {}", {}, VideoResponse)

    @respx.mock
    @pytest.mark.asyncio()
    async def test_posts_to_configured_endpoint(self) -> None:
        context = TwitchContext(client_id="x", gql_url="https://gql.example.com/gql")
        route = respx.post("https://gql.example.com/gql").respond(
            200, json={"data": {"video": None}}
        )

        async with httpx.AsyncClient() as client:
            gql = TwitchGqlClient(HttpxGraphQLTransport(client), context)
            await gql.query("video", "query {}", {}, VideoResponse)

        assert route.called
