"""
Collect tasks from a vault.

Reads every note the walker finds, keeping the tasks that parse and
logging the notes that don't. One bad note never stops the scan.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from obsidian_tasks.core.config.models import VaultConfig
from obsidian_tasks.core.tasks.models import Task
from obsidian_tasks.core.tasks.parser import TaskParseError, read_task
from obsidian_tasks.core.tasks.walker import vault_roots, walk_vault

logger = logging.getLogger(__name__)


@dataclass
class CollectResult:
    """Tasks found in a vault plus the number of notes that were skipped."""

    tasks: list[Task] = field(default_factory=list)
    skipped: int = 0


def collect_tasks(root: Path, config: VaultConfig | None = None) -> CollectResult:
    """
    Read all tasks under a vault root.

    Args:
        root: Vault directory
        config: Vault settings (note extensions, archive scanning)

    Returns:
        CollectResult with tasks in walk order

    Raises:
        PathNotFound: If the vault root does not exist or is not a directory
    """
    config = config or VaultConfig()
    result = CollectResult()
    seen: set[Path] = set()

    # Validate every root before reading anything
    walks = [
        walk_vault(r, config.extensions)
        for r in vault_roots(root, config.include_archive, config.archive_dir)
    ]

    for notes in walks:
        for note in notes:
            key = note.resolve()
            if key in seen:
                continue
            seen.add(key)

            try:
                task = read_task(note)
            except TaskParseError as e:
                logger.warning(f"Skipping {e.path}: {e.reason}")
                result.skipped += 1
                continue

            if task is not None:
                result.tasks.append(task)

    logger.debug(
        f"Collected {len(result.tasks)} tasks from {root} ({result.skipped} skipped)"
    )
    return result
