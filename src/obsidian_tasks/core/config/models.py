"""
Configuration data models for obsidian-tasks.

These models define the structure of ~/.config/obsidian-tasks/config.json,
with validation and type safety via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """
    How a vault is scanned.

    Example:
        >>> config = VaultConfig(extensions=["md", ".Markdown"])
        >>> config.extensions
        ['.md', '.markdown']
    """

    extensions: list[str] = Field(
        default_factory=lambda: [".md"],
        min_length=1,
        description="Note file extensions to read (case-insensitive)",
    )
    include_archive: bool = Field(
        default=False,
        description="Also scan an archive directory next to the vault",
    )
    archive_dir: str = Field(
        default="Archive",
        min_length=1,
        description="Name of the sibling archive directory",
    )

    model_config = ConfigDict(
        extra="ignore",  # Unknown keys in config.json are not an error
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: object) -> object:
        """Normalize extensions to lowercase with a leading dot."""
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, list):
            return v
        normalized = []
        for ext in v:
            if not isinstance(ext, str) or not ext.strip():
                continue
            ext = ext.strip().lower()
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized
