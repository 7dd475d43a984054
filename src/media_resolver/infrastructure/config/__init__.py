from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, TwitchConfig

__all__ = ["AppConfig", "EnvOverrides", "TwitchConfig", "load_config"]
