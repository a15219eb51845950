"""Keyed view over a version's raw field map.

Field names are case-insensitive and stored lower-cased. Field wrappers
are created lazily and cached per key; every mutation clears the cache so
wrappers never disagree with the raw data.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Iterator, Mapping

from content.field import Field
from content.language import SINGLE_LANGUAGE, Language
from core.types import ContentFields, FieldValue

if TYPE_CHECKING:
    from models.model_with_content import ModelWithContent


class Content:
    """Field-value map with lazily constructed field wrappers."""

    def __init__(
        self,
        data: Mapping[str, FieldValue] | None = None,
        model: "ModelWithContent | None" = None,
        language: Language = SINGLE_LANGUAGE,
        normalize: bool = True,
    ) -> None:
        """Create a content object.

        Args:
            data: Raw field map.
            model: Owning model, if any.
            language: Language the data belongs to.
            normalize: Set to False when keys are already lower-cased.
        """
        raw = dict(data or {})
        self._data: ContentFields = _lower_keys(raw) if normalize else raw
        self._fields: dict[str, Field] = {}
        self._model = model
        self._language = language

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __getattr__(self, name: str) -> Field:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def data(self) -> ContentFields:
        """Return a copy of the raw field map."""
        return dict(self._data)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def model(self) -> "ModelWithContent | None":
        return self._model

    def get(self, key: str) -> Field:
        """Return the field wrapper for a key.

        Unknown keys yield a wrapper over None instead of failing.
        """
        key = key.lower()
        field = self._fields.get(key)
        if field is None:
            field = Field(self, key, self._data.get(key))
            self._fields[key] = field
        return field

    def fields(self) -> dict[str, Field]:
        """Return wrappers for every stored field."""
        return {key: self.get(key) for key in self._data}

    def has(self, key: str) -> bool:
        """Return whether a field holds a non-None value."""
        return self._data.get(key.lower()) is not None

    def keys(self) -> list[str]:
        return list(self._data)

    def not_(self, *keys: str) -> "Content":
        """Return a copy without the given fields; the original is untouched."""
        clone = copy.copy(self)
        clone._data = dict(self._data)
        clone._fields = {}
        for key in keys:
            clone._data.pop(key.lower(), None)
        return clone

    def to_dict(self) -> ContentFields:
        return self.data

    def update(
        self,
        content: Mapping[str, FieldValue] | None = None,
        overwrite: bool = False,
    ) -> "Content":
        """Merge or replace the raw data and clear the field cache.

        Args:
            content: New field values; keys are lower-cased.
            overwrite: Replace the whole map instead of merging.

        Returns:
            This content object.
        """
        incoming = _lower_keys(dict(content or {}))
        self._data = incoming if overwrite else {**self._data, **incoming}
        self._fields = {}
        return self


def _lower_keys(data: Mapping[str, FieldValue]) -> ContentFields:
    return {str(key).lower(): value for key, value in data.items()}
