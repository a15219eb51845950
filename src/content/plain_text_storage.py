"""Content storage using plain text files in the content folder.

Each (version, language) slot of a model maps to exactly one file:

- the published version lives in the model root, pending changes in a
  ``_changes`` folder beneath it;
- draft pages keep their content in the published slot of the draft
  root and have no changes file;
- file models store content next to the file, named after it.

Fields are normalized before every write, never on read.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, cast

from codec.file_io import read_fields, write_fields
from codec.txt_codec import normalize_key
from content.language import Language
from content.version_id import VersionId
from core.config import FolioConfig
from core.constants import (
    CHANGES_DIR_NAME,
    SITE_FILE_STEM,
    SLUG_FIELD,
    TEMPLATE_FIELD,
    TITLE_FIELD,
    USER_FILE_STEM,
    USER_IDENTITY_FIELDS,
    UUID_FIELD,
)
from core.errors import FolioIOError, FolioLogicError, FolioNotFoundError
from core.logging_config import get_logger
from core.types import ContentFields

if TYPE_CHECKING:
    from models.file import FileModel
    from models.model_with_content import ModelWithContent
    from models.page import PageModel

_LOGGER = get_logger(__name__)

NormalizedFields = dict[str, object]


class PlainTextContentStorageHandler:
    """Filesystem storage handler for one model."""

    def __init__(self, model: "ModelWithContent", config: FolioConfig) -> None:
        """Initialize the handler.

        Args:
            model: Model whose content is stored.
            config: Runtime configuration with the content extension
                and unique-id flag.
        """
        self._model = model
        self._config = config

    @property
    def model(self) -> "ModelWithContent":
        return self._model

    def create(self, version_id: VersionId, language: Language, fields: Mapping[str, object]) -> None:
        """Create a version, writing the normalized fields."""
        content_file = self._write(version_id, language, fields)
        _LOGGER.info(
            "content_created",
            path=str(content_file),
            version=version_id.value,
            language=_language_label(language),
        )

    def delete(self, version_id: VersionId, language: Language) -> None:
        """Delete a version; a missing file is already the desired state.

        Raises:
            FolioIOError: If the file or its emptied directory cannot be removed.
        """
        content_file = self.content_file(version_id, language)
        try:
            content_file.unlink()
        except FileNotFoundError:
            pass
        except OSError as error:
            raise FolioIOError(f"Could not delete content file {content_file}: {error}.") from error
        remove_empty_directory(content_file.parent)
        _LOGGER.info(
            "content_deleted",
            path=str(content_file),
            version=version_id.value,
            language=_language_label(language),
        )

    def exists(self, version_id: VersionId, language: Language) -> bool:
        return self.content_file(version_id, language).is_file()

    def modified(self, version_id: VersionId, language: Language) -> int | None:
        """Return the modification timestamp in seconds, or None when absent."""
        content_file = self.content_file(version_id, language)
        try:
            return int(content_file.stat().st_mtime)
        except FileNotFoundError:
            return None
        except OSError as error:
            raise FolioIOError(f"Could not stat content file {content_file}: {error}.") from error

    def move(
        self,
        from_version_id: VersionId,
        from_language: Language,
        to_version_id: VersionId,
        to_language: Language,
    ) -> None:
        """Move a stored slot; an existing target is replaced.

        Fields are not normalized again.

        Raises:
            FolioNotFoundError: If the source slot does not exist.
            FolioIOError: If the rename fails.
        """
        source = self.content_file(from_version_id, from_language)
        target = self.content_file(to_version_id, to_language)
        if not source.is_file():
            raise FolioNotFoundError(
                f"Cannot move missing content file {source}. Create the version first."
            )
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            os.replace(source, target)
        except OSError as error:
            raise FolioIOError(
                f"Could not move content file {source} to {target}: {error}."
            ) from error
        remove_empty_directory(source.parent)
        _LOGGER.info("content_moved", source=str(source), target=str(target))

    def read(self, version_id: VersionId, language: Language) -> ContentFields:
        """Return the stored fields.

        Raises:
            FolioNotFoundError: If the version does not exist.
        """
        return read_fields(self.content_file(version_id, language))

    def touch(self, version_id: VersionId, language: Language) -> None:
        """Update the modification time of an existing version.

        Raises:
            FolioNotFoundError: If the version does not exist.
            FolioIOError: If the timestamp cannot be updated.
        """
        content_file = self.content_file(version_id, language)
        try:
            os.utime(content_file, None)
        except FileNotFoundError as error:
            raise FolioNotFoundError(
                f"Cannot touch missing content file {content_file}. Create the version first."
            ) from error
        except OSError as error:
            raise FolioIOError(
                f"Could not touch existing content file {content_file}: {error}."
            ) from error
        _LOGGER.debug("content_touched", path=str(content_file))

    def update(self, version_id: VersionId, language: Language, fields: Mapping[str, object]) -> None:
        """Replace the fields of an existing version.

        Raises:
            FolioNotFoundError: If the version does not exist.
        """
        if not self.exists(version_id, language):
            raise FolioNotFoundError(
                f"Cannot update missing content file {self.content_file(version_id, language)}. "
                "Create the version first."
            )
        content_file = self._write(version_id, language, fields)
        _LOGGER.info(
            "content_updated",
            path=str(content_file),
            version=version_id.value,
            language=_language_label(language),
        )

    def content_directory(self, version_id: VersionId) -> Path:
        """Return the absolute directory holding a version's files."""
        model = self._model
        directory = model.root.parent if model.kind == "file" else model.root
        if version_id is VersionId.CHANGES:
            directory = directory / CHANGES_DIR_NAME
        return directory

    def content_file(self, version_id: VersionId, language: Language) -> Path:
        """Return the absolute path to a version's content file.

        Raises:
            FolioLogicError: If the model kind has no content file rule, or a
                changes file is requested for a draft page.
        """
        model = self._model
        if model.kind == "file":
            stem = cast("FileModel", model).filename
        elif model.kind == "page":
            page = cast("PageModel", model)
            if page.is_draft and version_id is VersionId.CHANGES:
                raise FolioLogicError(
                    f"Drafts cannot have a changes file ({page.root}). "
                    "Write draft content to the published version."
                )
            stem = page.template
        elif model.kind == "site":
            stem = SITE_FILE_STEM
        elif model.kind == "user":
            stem = USER_FILE_STEM
        else:
            raise FolioLogicError(f'Cannot determine content file for model type "{model.kind}".')
        return self.content_directory(version_id) / self.filename(stem, language)

    def filename(self, stem: str, language: Language) -> str:
        """Return the content filename for a stem and language."""
        extension = self._config.content_extension
        if language.is_single:
            return f"{stem}.{extension}"
        return f"{stem}.{language.code}.{extension}"

    def normalize(self, language: Language, fields: Mapping[str, object]) -> NormalizedFields:
        """Normalize fields before they are written.

        Untranslatable fields and the uuid are cleared for non-default
        languages, then the model kind's rules apply. Normalizing an
        already normalized map returns an equal map.
        """
        normalized: NormalizedFields = {
            normalize_key(str(key)): value for key, value in fields.items()
        }
        if not language.is_default:
            for field in self._model.blueprint().untranslatable_fields():
                normalized[field.name] = None
            if self._config.uuids_enabled and UUID_FIELD in normalized:
                normalized[UUID_FIELD] = None
        return self._normalize_for_kind(normalized)

    def _normalize_for_kind(self, fields: NormalizedFields) -> NormalizedFields:
        model = self._model
        if model.kind == "file":
            return normalize_file_fields(cast("FileModel", model), fields)
        if model.kind == "page":
            return normalize_page_fields(fields)
        if model.kind == "site":
            return normalize_site_fields(fields)
        if model.kind == "user":
            return normalize_user_fields(fields)
        raise FolioLogicError(f'Cannot normalize content for model type "{model.kind}".')

    def _write(self, version_id: VersionId, language: Language, fields: Mapping[str, object]) -> Path:
        content_file = self.content_file(version_id, language)
        write_fields(content_file, self.normalize(language, fields))
        return content_file


def normalize_file_fields(model: "FileModel", fields: NormalizedFields) -> NormalizedFields:
    """Inject the file template unless the key is explicitly present."""
    if TEMPLATE_FIELD not in fields and model.template:
        return {**fields, TEMPLATE_FIELD: model.template}
    return fields


def normalize_page_fields(fields: NormalizedFields) -> NormalizedFields:
    """Put title and slug first."""
    return {
        TITLE_FIELD: fields.get(TITLE_FIELD),
        SLUG_FIELD: fields.get(SLUG_FIELD),
        **fields,
    }


def normalize_site_fields(fields: NormalizedFields) -> NormalizedFields:
    """Put the title first."""
    return {TITLE_FIELD: fields.get(TITLE_FIELD), **fields}


def normalize_user_fields(fields: NormalizedFields) -> NormalizedFields:
    """Strip fields owned by the account itself."""
    return {key: value for key, value in fields.items() if key not in USER_IDENTITY_FIELDS}


def remove_empty_directory(directory: Path) -> None:
    """Remove a directory when it exists and is empty.

    Raises:
        FolioIOError: If an empty directory cannot be removed.
    """
    if not directory.is_dir() or any(directory.iterdir()):
        return
    try:
        directory.rmdir()
    except OSError as error:
        raise FolioIOError(
            f"Could not delete empty content directory {directory}: {error}."
        ) from error


def _language_label(language: Language) -> str:
    return language.code or "single"
