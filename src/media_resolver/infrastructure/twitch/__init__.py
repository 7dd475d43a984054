"""Twitch URL classification and GraphQL-backed entity resolution."""

from __future__ import annotations

from .context import TwitchContext
from .dispatcher import ResolutionDispatcher, create_dispatcher
from .duration import parse_duration
from .url_matcher import UrlMatcher

__all__ = [
    "ResolutionDispatcher",
    "TwitchContext",
    "UrlMatcher",
    "create_dispatcher",
    "parse_duration",
]
