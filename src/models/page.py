"""Page model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from core.constants import DEFAULT_BLUEPRINT_NAME
from models.model_with_content import ModelKind, ModelWithContent

if TYPE_CHECKING:
    from models.context import FolioContext


@dataclass(frozen=True)
class PageModel(ModelWithContent):
    """A page folder.

    Attributes:
        context: Runtime context.
        root: Page directory; drafts live below a ``_drafts`` folder.
        template: Intended template name, also the content file stem.
        is_draft: Whether the page is an unpublished draft.
    """

    kind: ClassVar[ModelKind] = "page"

    context: "FolioContext" = field(repr=False, compare=False)
    root: Path
    template: str = DEFAULT_BLUEPRINT_NAME
    is_draft: bool = False

    @property
    def slug(self) -> str:
        return self.root.name

    def blueprint_name(self) -> str:
        return f"pages/{self.template}"

    def blueprint_fallback(self) -> str | None:
        return f"pages/{DEFAULT_BLUEPRINT_NAME}"

    def has_changes_version(self) -> bool:
        """Drafts are edited in place and have no changes file."""
        return not self.is_draft

    def with_template(self, template: str) -> "PageModel":
        return replace(self, template=template)
