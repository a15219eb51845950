"""Lazy wrapper around a single content field value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.types import FieldValue

if TYPE_CHECKING:
    from content.content import Content


class Field:
    """Read-only view of one field inside a Content object."""

    def __init__(self, content: "Content | None", key: str, value: FieldValue = None) -> None:
        self._content = content
        self._key = key
        self._value = value

    def __repr__(self) -> str:
        return f"Field(key={self._key!r}, value={self._value!r})"

    def __str__(self) -> str:
        return self._value or ""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Field):
            return self._key == other._key and self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> FieldValue:
        return self._value

    @property
    def content(self) -> "Content | None":
        """Return the parent content object."""
        return self._content

    def is_empty(self) -> bool:
        """Return whether the value is None or only whitespace."""
        return self._value is None or self._value.strip() == ""

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def or_(self, fallback: "str | Field | None") -> "Field":
        """Return this field, or a field holding the fallback when empty."""
        if self.is_not_empty():
            return self
        if isinstance(fallback, Field):
            return fallback
        return Field(self._content, self._key, fallback)
