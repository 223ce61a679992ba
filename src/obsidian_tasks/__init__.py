"""
obsidian-tasks

A CLI that reads task notes from an Obsidian vault and prints filtered
views as JSON, or counts for status bars.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from obsidian_tasks.core.config.models import VaultConfig
from obsidian_tasks.core.tasks.models import Task

__all__ = ["Task", "VaultConfig", "__version__"]
