"""httpx implementation of the GraphQL transport port."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from media_resolver.domain.entities import UpstreamHttpError
from media_resolver.domain.ports.graphql_transport import TransportResponse

log = structlog.get_logger(__name__)


class HttpxGraphQLTransport:
    """POSTs JSON payloads through a shared ``httpx.AsyncClient``.

    One attempt per call; network failures are surfaced immediately as
    ``UpstreamHttpError`` without a status code.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def post(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> TransportResponse:
        try:
            resp = await self._http.post(url, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            log.error("gql_request_failed", url=url, error=str(exc))
            raise UpstreamHttpError(None, str(exc)) from exc
        return TransportResponse(status_code=resp.status_code, body=resp.content)
