"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from media_resolver.application.use_cases.resolve_url import ResolveUrlUseCase
from media_resolver.infrastructure.http import HttpxGraphQLTransport
from media_resolver.infrastructure.twitch import (
    TwitchContext,
    UrlMatcher,
    create_dispatcher,
)
from media_resolver.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared HTTP client and the resolution pipeline.

    The pipeline is stateless; the only shared values are the immutable
    TwitchContext and the HTTP connection pool.
    """
    state = cast(AppState, app.state)
    config = state.config

    context = TwitchContext.from_config(config)
    if not context.has_credentials:
        log.warning(
            "twitch_client_id_missing",
            hint="set twitch.client_id or TWITCH_CLIENT_ID and restart",
        )
    state.twitch_context = context

    state.http_client = httpx.AsyncClient(
        headers={"User-Agent": config.http_user_agent},
    )
    transport = HttpxGraphQLTransport(state.http_client)

    state.dispatcher = create_dispatcher(transport, context)
    state.resolve_uc = ResolveUrlUseCase(
        classifier=UrlMatcher(context),
        dispatcher=state.dispatcher,
    )

    log.info(
        "app_started",
        entities=state.dispatcher.supported_entities,
        credentials=context.has_credentials,
    )
    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("app_shutdown")
