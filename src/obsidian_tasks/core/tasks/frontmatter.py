"""
Frontmatter extraction for note files.

Locates the YAML block at the top of a note:

    ---
    status: todo
    due: 2026-01-30
    ---
    # Note body

The opening delimiter must be the first non-empty line and both
delimiters must be exactly ``---``.
"""

FRONTMATTER_DELIMITER = "---"


class MalformedFrontmatterError(ValueError):
    """Raised when a note opens a frontmatter block but never closes it."""

    pass


def extract_frontmatter(text: str) -> str | None:
    """
    Return the YAML text between the frontmatter delimiters.

    Args:
        text: Raw note contents

    Returns:
        The lines strictly between the delimiters joined with newlines,
        or None if the note has no frontmatter block

    Raises:
        MalformedFrontmatterError: If the closing delimiter is missing
    """
    lines = text.lstrip("\ufeff").splitlines()

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    if start == len(lines) or lines[start] != FRONTMATTER_DELIMITER:
        return None

    for end in range(start + 1, len(lines)):
        if lines[end] == FRONTMATTER_DELIMITER:
            return "\n".join(lines[start + 1 : end])

    raise MalformedFrontmatterError("frontmatter block is not closed with '---'")
