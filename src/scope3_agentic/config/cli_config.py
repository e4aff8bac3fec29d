# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""CLI configuration stored in ~/.scope3/config.json.

Environment variables (SCOPE3_API_KEY, SCOPE3_BASE_URL, SCOPE3_ENVIRONMENT)
override values from the file.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from ..errors import ConfigError

CONFIG_DIR = Path.home() / ".scope3"
CONFIG_FILE = CONFIG_DIR / "config.json"

VALID_KEYS = ("apiKey", "baseUrl", "environment")

_ENV_OVERRIDES = {
    "apiKey": "SCOPE3_API_KEY",
    "baseUrl": "SCOPE3_BASE_URL",
    "environment": "SCOPE3_ENVIRONMENT",
}


def read_config_file(path: Optional[Path] = None) -> dict[str, Any]:
    """Read the config file, returning an empty dict if missing.

    Raises:
        ConfigError: The file exists but is not valid JSON
    """
    path = path or CONFIG_FILE
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return {k: v for k, v in data.items() if k in VALID_KEYS}


def load_config(path: Optional[Path] = None) -> dict[str, Any]:
    """Load config from file, then apply environment overrides."""
    config = read_config_file(path)
    for key, env_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[key] = value
    return config


def save_config(config: dict[str, Any], path: Optional[Path] = None) -> Path:
    """Write config to disk and return the path written."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path


def set_config_value(key: str, value: str, path: Optional[Path] = None) -> Path:
    """Set one key in the config file.

    Raises:
        ConfigError: Unknown key
    """
    if key not in VALID_KEYS:
        raise ConfigError(f"Unknown config key: {key}. Valid keys: {', '.join(VALID_KEYS)}")
    config = read_config_file(path)
    config[key] = value
    return save_config(config, path)


def clear_config(path: Optional[Path] = None) -> bool:
    """Delete the config file. Returns False when there was nothing to delete."""
    path = path or CONFIG_FILE
    if not path.exists():
        return False
    path.unlink()
    return True
