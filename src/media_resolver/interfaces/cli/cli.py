from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from media_resolver.infrastructure.config import load_config
from media_resolver.infrastructure.logging.setup import configure_logging
from media_resolver.interfaces.app import create_app

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="media-resolver")

    # Server options
    parser.add_argument(
        "--host",
        default=None,
        help="Bind host (overrides server.host).",
    )
    parser.add_argument(
        "--port",
        default=None,
        type=int,
        help="Bind port (overrides server.port).",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--twitch-client-id",
        default=None,
        help="Override twitch.client_id.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(argv)


def build_cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map the given flags onto config sections; unset flags are left out."""
    flags: dict[tuple[str, str], Any] = {
        ("server", "host"): args.host,
        ("server", "port"): args.port,
        ("twitch", "client_id"): args.twitch_client_id,
        ("logging", "level"): args.log_level,
        ("logging", "format"): args.log_format,
    }
    overrides: dict[str, Any] = {}
    for (section, key), value in flags.items():
        if value:
            overrides.setdefault(section, {})[key] = value
    return overrides


def start(argv: Iterable[str] | None = None) -> None:
    """
    Process entrypoint.

    Loads config exactly once, then builds the FastAPI app with it.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=build_cli_overrides(args),
    )

    log_config = configure_logging(config)

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_config=log_config,
    )


if __name__ == "__main__":
    raise SystemExit(start())
