"""Port for the outbound GraphQL transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Raw backend answer: status code plus undecoded body."""

    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class GraphQLTransportPort(Protocol):
    """Sends one POST request with a JSON body and returns the raw response.

    Implementations raise ``UpstreamHttpError`` (status ``None``) when no
    response could be obtained. They never retry.
    """

    async def post(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> TransportResponse: ...
