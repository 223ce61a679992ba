"""
Configuration models and loading.

This module provides the Pydantic model for obsidian-tasks configuration
with multi-layer merging: defaults < user config < env vars.
"""

from .env import load_layered_env
from .loader import get_user_config_path, get_xdg_config_home, load_config
from .models import VaultConfig

__all__ = [
    "VaultConfig",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
