"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from media_resolver.infrastructure.config import AppConfig
from media_resolver.interfaces.app_state import AppState
from media_resolver.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def create_app(config: AppConfig) -> FastAPI:
    """Create the FastAPI app. Configuration only, no resource initialization.

    Resources (HTTP client, resolvers) are created in lifespan().
    """
    app = FastAPI(
        title="media-resolver",
        description="Resolves Twitch page URLs into playable media playlists",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from media_resolver.interfaces.api.resolve.router import router as resolve_router

    app.include_router(resolve_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str | bool | list[str]]:
        """Liveness probe; returns 200 while the process is running."""
        context = getattr(app.state, "twitch_context", None)
        dispatcher = getattr(app.state, "dispatcher", None)
        return {
            "status": "ok",
            "credentials": bool(context and context.has_credentials),
            "entities": dispatcher.supported_entities if dispatcher else [],
        }

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code if response is not None else 500,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
                user_agent=request.headers.get("user-agent"),
            )

    return app
