"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from media_resolver.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from media_resolver.application.use_cases.resolve_url import ResolveUrlUseCase
    from media_resolver.infrastructure.twitch import ResolutionDispatcher, TwitchContext


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig
    twitch_context: TwitchContext

    # Infrastructure
    http_client: httpx.AsyncClient

    # Resolution
    dispatcher: ResolutionDispatcher
    resolve_uc: ResolveUrlUseCase
