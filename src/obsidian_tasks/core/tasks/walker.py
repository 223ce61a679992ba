"""
Vault walker.

Enumerates note files under a vault root. The root is validated up front;
everything below it is walked lazily, in sorted order, and unreadable
subdirectories are logged and skipped.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md",)


class PathNotFound(Exception):
    """The vault root does not exist or is not a directory."""

    def __init__(self, path: Path, reason: str = "not found or not a directory") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Vault path {reason}: {path}")


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")


def _iter_notes(root: Path, extensions: frozenset[str]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.suffix.lower() in extensions and path.is_file():
                yield path


def walk_vault(root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Iterator[Path]:
    """
    Yield every note file under ``root``.

    Args:
        root: Vault directory
        extensions: Note file suffixes, matched case-insensitively

    Returns:
        Lazy iterator of note file paths

    Raises:
        PathNotFound: If root is missing or unreadable
    """
    root = Path(root)
    if not root.is_dir():
        raise PathNotFound(root)
    if not os.access(root, os.R_OK | os.X_OK):
        raise PathNotFound(root, "is not readable")

    return _iter_notes(root, frozenset(ext.lower() for ext in extensions))


def vault_roots(
    root: Path, include_archive: bool = False, archive_dir: str = "Archive"
) -> list[Path]:
    """
    Get the directories to scan for a vault.

    With ``include_archive``, an archive folder next to the vault (e.g.
    ``Tasks/`` and ``Archive/`` side by side) is scanned as well.

    Args:
        root: Vault directory given on the command line
        include_archive: Also scan the sibling archive directory
        archive_dir: Name of the sibling archive directory

    Returns:
        Vault root first, followed by the archive directory if it applies
    """
    roots = [Path(root)]
    if not include_archive:
        return roots

    sibling = Path(root).parent / archive_dir
    if sibling.is_dir() and sibling.resolve() != Path(root).resolve():
        roots.append(sibling)
    else:
        logger.debug(f"No archive directory at {sibling}")
    return roots
