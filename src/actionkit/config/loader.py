"""Configuration loader with TOML support and merge capability."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from actionkit.config.schema import ActionsConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ACTIONKIT_CONFIG_PATH"
LOCAL_CONFIG_NAME = "actionkit.toml"


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    logger.debug("Loaded config from %s", path)
    return data


def load_config(config_path: Path | None = None) -> ActionsConfig:
    """Load configuration with precedence.

    Priority (highest to lowest):
    1. Provided config_path
    2. $ACTIONKIT_CONFIG_PATH
    3. ./actionkit.toml
    4. Built-in defaults (schema)

    Args:
        config_path: Explicit path to config file.

    Returns:
        Merged ActionsConfig instance.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist.
    """
    config_data: dict[str, Any] = {}

    local_path = Path(LOCAL_CONFIG_NAME)
    if local_path.exists():
        config_data = _deep_merge(config_data, _read_toml(local_path))

    env_config = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_config:
        env_path = Path(env_config).expanduser()
        if env_path.exists():
            config_data = _deep_merge(config_data, _read_toml(env_path))
        else:
            logger.warning("$%s points at missing file %s", CONFIG_ENV_VAR, env_path)

    if config_path is not None:
        config_path = Path(config_path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config_data = _deep_merge(config_data, _read_toml(config_path))

    return ActionsConfig(**config_data)
