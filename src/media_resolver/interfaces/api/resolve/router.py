"""``/resolve`` endpoint used by media player scripts."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.responses import Response

from media_resolver.domain.entities import NoMatchError, ResolveError
from media_resolver.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["resolve"])


@router.get("/resolve")
async def resolve(
    request: Request,
    url: str = Query(..., description="Media page URL to resolve."),
    output: str = Query(default="", description="'json' for a playlist body."),
) -> Response:
    """Resolve a media page URL.

    Responses:
        - unmatched URL: 404, empty body
        - resolution error: ``{"error", "kind"}``; 200 with output=json
          (player playlist parsers cannot read non-200 bodies), else 500
        - output=json: the playlist as a JSON array
        - otherwise: 307 redirect to the first item's path
    """
    state = cast(AppState, request.app.state)
    want_json = output == "json"

    try:
        items = await state.resolve_uc.execute(url)
    except NoMatchError:
        return Response(status_code=404)
    except ResolveError as e:
        log.error("resolve_failed", url=url, kind=e.kind.value, error=e.message)
        return JSONResponse(
            {"error": e.message, "kind": e.kind.value},
            status_code=200 if want_json else 500,
        )

    if want_json:
        return JSONResponse([item.to_dict() for item in items])
    if items:
        return RedirectResponse(items[0].path, status_code=307)
    return Response(status_code=404)
