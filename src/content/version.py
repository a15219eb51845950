"""Per-model handle on one content version.

A Version holds no state beyond its model and id; every call goes to the
model's storage handler, so repeated ``content`` calls re-read storage.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Mapping

from codec.txt_codec import normalize_key
from content.language import Language
from content.model_content import ModelContent
from content.version_id import VersionId
from core.errors import FolioNotFoundError
from core.logging_config import get_logger

if TYPE_CHECKING:
    from models.model_with_content import ModelWithContent

_LOGGER = get_logger(__name__)


class Version:
    """Content version of a model."""

    def __init__(self, model: "ModelWithContent", version_id: VersionId) -> None:
        self._model = model
        self._id = version_id

    def __repr__(self) -> str:
        return f"Version(model={self._model!r}, id={self._id.value!r})"

    @property
    def id(self) -> VersionId:
        return self._id

    @property
    def model(self) -> "ModelWithContent":
        return self._model

    def content(self, language: Language) -> ModelContent:
        """Read the version and wrap it in a content object.

        Raises:
            FolioNotFoundError: If the version does not exist.
        """
        return ModelContent(
            data=self.read(language),
            model=self._model,
            language=language,
        )

    def content_file(self, language: Language) -> Path:
        return self._model.storage().content_file(self._id, language)

    def create(self, language: Language, fields: Mapping[str, object]) -> None:
        self._model.storage().create(self._id, language, fields)

    def delete(self, language: Language) -> None:
        self._model.storage().delete(self._id, language)

    def exists(self, language: Language) -> bool:
        return self._model.storage().exists(self._id, language)

    def modified(self, language: Language) -> int | None:
        return self._model.storage().modified(self._id, language)

    def move(self, from_language: Language, to_version_id: VersionId, to_language: Language) -> None:
        self._model.storage().move(self._id, from_language, to_version_id, to_language)

    def publish(self, language: Language) -> None:
        """Promote this version's content to the published version.

        Raises:
            FolioNotFoundError: If this version does not exist.
        """
        if self._id is VersionId.PUBLISHED:
            return
        self.move(language, VersionId.PUBLISHED, language)
        _LOGGER.info("content_published", model=repr(self._model), language=language.code)

    def read(self, language: Language) -> dict[str, str | None]:
        return self._model.storage().read(self._id, language)

    def save(
        self,
        language: Language,
        fields: Mapping[str, object],
        overwrite: bool = False,
    ) -> None:
        """Update the version, or create it when it does not exist yet.

        Args:
            language: Target language.
            fields: Field values to store.
            overwrite: Replace stored fields instead of merging into them.
        """
        incoming = {normalize_key(str(key)): value for key, value in fields.items()}
        storage = self._model.storage()
        try:
            merged = incoming if overwrite else {**storage.read(self._id, language), **incoming}
            storage.update(self._id, language, merged)
        except FolioNotFoundError:
            storage.create(self._id, language, incoming)

    def touch(self, language: Language) -> None:
        self._model.storage().touch(self._id, language)

    def update(self, language: Language, fields: Mapping[str, object]) -> None:
        self._model.storage().update(self._id, language, fields)
