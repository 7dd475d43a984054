"""Layered configuration: defaults < YAML < environment < CLI.

Every layer uses the sectioned shape of config.example.yaml
(``server``, ``http``, ``logging``, ``twitch`` plus the top-level
``app_name`` and ``environment``). A later layer replaces individual keys
inside a section and leaves the rest of that section alone.
"""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides


def _overlay(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        section = target.get(key)
        if isinstance(section, dict) and isinstance(value, Mapping):
            _overlay(section, value)
        else:
            target[key] = deepcopy(value)


def _yaml_layer(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open(encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{path}: config YAML must be a mapping, not {type(data).__name__}"
        )
    return data


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """
    Build the validated AppConfig from all layers.

    A .env file only fills variables the process environment does not
    already set, so it ranks with (not above) the environment. Nothing is
    written to disk.
    """
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    layers: list[Mapping[str, Any]] = [DEFAULT_CONFIG]
    if config_path is not None:
        layers.append(_yaml_layer(config_path))
    layers.append(EnvOverrides().to_update_dict())
    layers.append(cli_overrides or {})

    merged: dict[str, Any] = {}
    for layer in layers:
        _overlay(merged, layer)
    return AppConfig.model_validate(merged)
