"""Shared behavior of content-bearing models.

Model kinds form a closed set tagged by ``kind``: ``file``, ``page``,
``site`` and ``user``. Storage path and normalization rules dispatch on
that tag and reject anything else.
"""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Literal, Mapping

from content.language import Language
from content.lock import Lock
from content.model_content import ModelContent
from content.translation import Translation
from content.version import Version
from content.version_id import VersionId
from core.constants import DEFAULT_BLUEPRINT_NAME
from core.errors import FolioLogicError, FolioNotFoundError
from core.logging_config import get_logger
from core.types import ContentFields
from models.blueprint import Blueprint

if TYPE_CHECKING:
    from content.plain_text_storage import PlainTextContentStorageHandler
    from models.context import FolioContext

ModelKind = Literal["file", "page", "site", "user"]

_LOGGER = get_logger(__name__)


class ModelWithContent:
    """Base class for models that own versioned content."""

    kind: ClassVar[ModelKind]
    context: "FolioContext"
    root: Path

    def blueprint_name(self) -> str:
        raise NotImplementedError

    def blueprint_fallback(self) -> str | None:
        return None

    def blueprint(self) -> Blueprint:
        """Return the blueprint describing this model's fields."""
        return self.context.blueprints.find(self.blueprint_name(), self.blueprint_fallback())

    def sibling_blueprint(self, name: str) -> Blueprint:
        """Return a blueprint from the same folder as this model's blueprint."""
        folder = posixpath.dirname(self.blueprint_name())
        if not folder:
            return self.context.blueprints.find(name)
        return self.context.blueprints.find(
            f"{folder}/{name}", f"{folder}/{DEFAULT_BLUEPRINT_NAME}"
        )

    def storage(self) -> "PlainTextContentStorageHandler":
        """Return a fresh storage handler for this model."""
        return self.context.storage_for(self)

    def version(self, version_id: VersionId | str = VersionId.PUBLISHED) -> Version:
        return Version(self, VersionId.from_value(version_id))

    def has_changes_version(self) -> bool:
        """Return whether the model can hold pending changes."""
        return True

    def language(self, code: str | None = None) -> Language:
        return self.context.languages.from_code(code)

    def content_directory(self) -> Path:
        return self.root

    def content(self, language_code: str | None = None) -> ModelContent:
        """Return the current content for a language.

        A version that was never written yields empty content.
        """
        language = self.language(language_code)
        try:
            return self.version().content(language)
        except FolioNotFoundError:
            return ModelContent(model=self, language=language)

    def save(
        self,
        fields: Mapping[str, object],
        language_code: str | None = None,
        overwrite: bool = False,
    ) -> "ModelWithContent":
        """Merge fields into the stored content, creating it when needed."""
        self.version().save(self.language(language_code), fields, overwrite=overwrite)
        return self

    def lock(self) -> Lock | None:
        """Return the editing lock, or None when locking does not apply."""
        if not self.context.config.locking_enabled:
            return None
        if not self.content_directory().is_dir():
            return None
        return Lock(self, self.context.users)

    def is_locked(self) -> bool:
        lock = self.lock()
        return lock is not None and lock.is_active()

    def translation(self, language_code: str | None = None) -> Translation:
        return Translation(
            model=self,
            version=self.version(),
            language=self.language(language_code),
        )

    def translations(self) -> list[Translation]:
        """Return one translation per configured language."""
        languages = self.context.languages
        if not languages.is_multilingual:
            return [self.translation()]
        return [self.translation(code) for code in languages.codes()]

    def with_template(self, template: str) -> "ModelWithContent":
        raise FolioLogicError(
            f"Cannot change the blueprint of a {self.kind} model. "
            "Only pages and files support conversion."
        )

    def convert_to(self, blueprint_name: str) -> "ModelWithContent":
        """Convert every stored translation to another blueprint.

        Each translation is converted, its old file is deleted and the
        converted fields are written through the new model.

        Returns:
            The model using the new blueprint.
        """
        converted_model = self.with_template(blueprint_name)
        for translation in self.translations():
            if not translation.exists():
                continue
            language = translation.language
            fields = self.version().content(language).convert_to(blueprint_name)
            fields = self.prepare_converted_fields(fields, blueprint_name)
            self.storage().delete(VersionId.PUBLISHED, language)
            converted_model.version().save(language, fields, overwrite=True)
        _LOGGER.info(
            "model_converted",
            kind=self.kind,
            root=str(self.root),
            blueprint=blueprint_name,
        )
        return converted_model

    def prepare_converted_fields(self, fields: ContentFields, blueprint_name: str) -> ContentFields:
        return fields
