"""File model: a media file whose content sits next to it."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from core.constants import DEFAULT_BLUEPRINT_NAME, TEMPLATE_FIELD
from core.types import ContentFields
from models.model_with_content import ModelKind, ModelWithContent

if TYPE_CHECKING:
    from models.context import FolioContext


@dataclass(frozen=True)
class FileModel(ModelWithContent):
    """A file attached to a page or the site.

    Attributes:
        context: Runtime context.
        root: Path of the media file itself.
        template: Optional file template.
    """

    kind: ClassVar[ModelKind] = "file"

    context: "FolioContext" = field(repr=False, compare=False)
    root: Path
    template: str | None = None

    @property
    def filename(self) -> str:
        return self.root.name

    def blueprint_name(self) -> str:
        return f"files/{self.template or DEFAULT_BLUEPRINT_NAME}"

    def blueprint_fallback(self) -> str | None:
        return f"files/{DEFAULT_BLUEPRINT_NAME}"

    def content_directory(self) -> Path:
        return self.root.parent

    def with_template(self, template: str) -> "FileModel":
        return replace(self, template=template)

    def prepare_converted_fields(self, fields: ContentFields, blueprint_name: str) -> ContentFields:
        """Point the stored template at the new blueprint."""
        return {**fields, TEMPLATE_FIELD: blueprint_name}
