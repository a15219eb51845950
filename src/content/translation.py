"""Translation handles: one language of a model's content version."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from content.language import Language
from content.version import Version
from core.constants import SLUG_FIELD
from core.errors import FolioNotFoundError

if TYPE_CHECKING:
    from models.model_with_content import ModelWithContent


class Translation:
    """A model's content in one language."""

    def __init__(self, model: "ModelWithContent", version: Version, language: Language) -> None:
        self._model = model
        self._version = version
        self._language = language

    def __repr__(self) -> str:
        return f"Translation(code={self.code!r}, version={self._version.id.value!r})"

    @classmethod
    def create(
        cls,
        model: "ModelWithContent",
        version: Version,
        language: Language,
        fields: Mapping[str, object],
        slug: str | None = None,
    ) -> "Translation":
        """Create the translation's content file and return its handle.

        Args:
            model: Owning model.
            version: Version to write.
            language: Translation language.
            fields: Initial field values.
            slug: Optional translated slug stored with the fields.
        """
        payload = dict(fields)
        if slug is not None:
            payload[SLUG_FIELD] = slug
        version.create(language, payload)
        return cls(model=model, version=version, language=language)

    @property
    def code(self) -> str:
        return self._language.code

    @property
    def language(self) -> Language:
        return self._language

    @property
    def model(self) -> "ModelWithContent":
        return self._model

    @property
    def version(self) -> Version:
        return self._version

    def content(self) -> dict[str, str | None]:
        """Return the stored fields, or an empty map when not yet created."""
        try:
            return self._version.content(self._language).to_dict()
        except FolioNotFoundError:
            return {}

    def exists(self) -> bool:
        return self._version.exists(self._language)

    def is_default(self) -> bool:
        return self._language.is_default

    def slug(self) -> str | None:
        """Return the custom translated slug, if any."""
        return self.content().get(SLUG_FIELD)

    def to_dict(self) -> dict[str, object]:
        content = self.content()
        return {
            "code": self.code,
            "content": content,
            "exists": self.exists(),
            "slug": content.get(SLUG_FIELD),
        }

    def update(self, fields: Mapping[str, object] | None = None, overwrite: bool = False) -> "Translation":
        """Save fields into this translation, creating it when needed."""
        self._version.save(self._language, fields or {}, overwrite=overwrite)
        return self
