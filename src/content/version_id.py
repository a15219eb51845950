"""Version identifiers for content slots."""

from __future__ import annotations

from enum import Enum

from core.errors import FolioLogicError


class VersionId(str, Enum):
    """Named on-disk slot a model's content can occupy."""

    PUBLISHED = "published"
    CHANGES = "changes"

    @classmethod
    def from_value(cls, value: "str | VersionId") -> "VersionId":
        """Resolve a version id from its string value."""
        if isinstance(value, VersionId):
            return value
        try:
            return cls(value.lower())
        except ValueError as error:
            raise FolioLogicError(
                f"Unknown version id '{value}'. Use one of: "
                f"{', '.join(item.value for item in cls)}."
            ) from error
