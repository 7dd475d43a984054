"""Request/response pipeline shared by all entity resolvers."""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from media_resolver.domain.entities import UpstreamDecodeError, UpstreamHttpError
from media_resolver.domain.ports.graphql_transport import GraphQLTransportPort
from media_resolver.infrastructure.twitch.context import TwitchContext

log = structlog.get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Sent with every query; the access token is requested for the web player.
_PLAYER_VARIABLES: dict[str, str] = {"platform": "web", "playerType": "site"}


class TwitchGqlClient:
    """Issues exactly one GraphQL POST per call and decodes the answer.

    Steps:
        1. Build ``{"query": ..., "variables": ...}`` with the player variables.
        2. POST it with the ``Client-ID`` header.
        3. Anything but 200 -> ``UpstreamHttpError`` (status + body logged).
        4. Validate the body into ``response_model``; failure ->
           ``UpstreamDecodeError``.
    """

    def __init__(self, transport: GraphQLTransportPort, context: TwitchContext) -> None:
        self._transport = transport
        self._context = context

    async def query(
        self,
        operation: str,
        document: str,
        variables: dict[str, Any],
        response_model: type[ResponseT],
    ) -> ResponseT:
        payload = {
            "query": document,
            "variables": {**variables, **_PLAYER_VARIABLES},
        }
        headers = {"Client-ID": self._context.client_id or ""}

        resp = await self._transport.post(
            self._context.gql_url, headers=headers, payload=payload
        )

        if resp.status_code != 200:
            log.error(
                "gql_bad_status",
                operation=operation,
                status=resp.status_code,
                body=resp.text,
            )
            raise UpstreamHttpError(resp.status_code, resp.text)

        try:
            data = response_model.model_validate_json(resp.body)
        except ValidationError as exc:
            log.error(
                "gql_decode_failed",
                operation=operation,
                body=resp.text,
                errors=exc.error_count(),
            )
            raise UpstreamDecodeError(resp.text) from exc

        log.debug("gql_response", operation=operation, data=data)
        return data
