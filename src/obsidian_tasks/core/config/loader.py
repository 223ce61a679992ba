"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import VaultConfig

logger = logging.getLogger(__name__)

APP_NAME = "obsidian-tasks"


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/obsidian-tasks/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / APP_NAME / "config.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"a": 1, "b": {"x": 10}}, {"b": {"y": 20}})
        {'a': 1, 'b': {'x': 10, 'y': 20}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config at {path}: expected a JSON object")
            return None
    except (json.JSONDecodeError, OSError) as e:
        # Config problems should never stop a listing
        logger.warning(f"Failed to parse config at {path}: {e}")
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        OBSIDIAN_TASKS_EXTENSIONS - comma-separated note extensions
        OBSIDIAN_TASKS_INCLUDE_ARCHIVE - scan the sibling archive directory
        OBSIDIAN_TASKS_ARCHIVE_DIR - name of the sibling archive directory

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if extensions := os.environ.get("OBSIDIAN_TASKS_EXTENSIONS"):
        result["extensions"] = [ext for ext in extensions.split(",") if ext.strip()]

    include_archive = os.environ.get("OBSIDIAN_TASKS_INCLUDE_ARCHIVE")
    if include_archive is not None:
        result["include_archive"] = include_archive.strip().lower() not in ("false", "0", "")

    if archive_dir := os.environ.get("OBSIDIAN_TASKS_ARCHIVE_DIR"):
        result["archive_dir"] = archive_dir

    return result


def get_default_config() -> dict[str, Any]:
    """Get hardcoded default configuration."""
    return {
        "extensions": [".md"],
        "include_archive": False,
        "archive_dir": "Archive",
    }


def load_config(config_path: Path | None = None) -> VaultConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (OBSIDIAN_TASKS_*)
        2. User config (~/.config/obsidian-tasks/config.json)
        3. Hardcoded defaults

    Args:
        config_path: Explicit config file (defaults to the user config path)

    Returns:
        Validated VaultConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    merged = get_default_config()

    if user_config := load_json_file(config_path or get_user_config_path()):
        merged = deep_merge(merged, user_config)

    merged = apply_env_overrides(merged)

    return VaultConfig(**merged)
