"""YAML config loader with environment overrides and dotted-key lookup."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from wanniweather.config.schema import AppConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path yields the defaults. ``OPENWEATHER_API_KEY`` in the
    environment takes precedence over ``provider.api_key`` from the file.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file %s not found, using defaults", path)

    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        raw["provider"] = {**(raw.get("provider") or {}), "api_key": env_key}

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.timeout_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
