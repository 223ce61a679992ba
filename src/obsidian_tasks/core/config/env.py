"""Environment loading helpers.

obsidian-tasks settings (``OBSIDIAN_TASKS_PATH``, ``OBSIDIAN_TASKS_EXTENSIONS``
and friends) may also live in .env files:
- OS environment (highest precedence)
- Project .env in the working directory
- User .env (~/.config/obsidian-tasks/.env)

Only OBSIDIAN_TASKS_* keys are exported; anything else in a shared .env
file is left alone. A .env file never overrides a variable that is already
exported in the shell, so a status bar command line always wins.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import APP_NAME, get_xdg_config_home

ENV_PREFIX = "OBSIDIAN_TASKS_"


def read_env_file(path: Path) -> dict[str, str]:
    """Read the OBSIDIAN_TASKS_* assignments from one .env file."""
    if not path.is_file():
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }


def load_layered_env(
    *,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, str]:
    """Export OBSIDIAN_TASKS_* settings found in user and project .env files.

    Args:
        user_env_paths: User env files (defaults to the XDG config dir)
        project_env_paths: Project env files (defaults to ./.env)

    Returns:
        The variables that were exported
    """
    if user_env_paths is None:
        user_env_paths = [get_xdg_config_home() / APP_NAME / ".env"]
    if project_env_paths is None:
        project_env_paths = [Path.cwd() / ".env"]

    # Later files win: user first, then project
    layered: dict[str, str] = {}
    for path in [*user_env_paths, *project_env_paths]:
        layered.update(read_env_file(Path(path)))

    exported = {k: v for k, v in layered.items() if k not in os.environ}
    os.environ.update(exported)
    return exported
