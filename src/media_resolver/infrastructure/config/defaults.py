"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "media-resolver",
    "environment": "dev",
    "server": {
        "host": "127.0.0.1",
        "port": 8080,
    },
    "http": {
        "user_agent": "media-resolver/0.1.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "twitch": {
        "client_id": None,
        "gql_url": "https://gql.twitch.tv/gql",
        "page_size": 30,
    },
}
