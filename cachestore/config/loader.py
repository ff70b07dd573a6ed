"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  : static defaults checked into the repo
  2. .env file           : local developer overrides (not committed)
  3. Environment vars    : set at deploy time

Only settings that actually carry a value override the YAML file, so an
unset ``CACHE_DEFAULT_TTL`` leaves a ``store.ttl`` from YAML in place.
"""

from pathlib import Path
from typing import Any

import yaml

from cachestore.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file is not an error.
        settings: Settings to merge on top; read from the environment when omitted.

    Returns:
        Resolved configuration with ``store``, ``engine`` and ``logging`` sections.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    for section in ("store", "engine", "logging"):
        yaml_config.setdefault(section, {})

    settings = settings or Settings()
    env_overrides = {
        "store": {
            "ttl": settings.cache_default_ttl,
        },
        "engine": {
            "url": settings.redis_url,
        },
        "logging": {
            "level": settings.log_level,
            "env": settings.app_env,
        },
    }

    _deep_merge(yaml_config, _drop_unset(env_overrides))
    return yaml_config


def _drop_unset(overrides: dict[str, Any]) -> dict[str, Any]:
    """Remove None / empty-string leaves so they never mask YAML values."""
    cleaned: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(value, dict):
            cleaned[key] = _drop_unset(value)
        elif value is not None and value != "":
            cleaned[key] = value
    return cleaned


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
