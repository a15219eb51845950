"""Site model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from models.model_with_content import ModelKind, ModelWithContent

if TYPE_CHECKING:
    from models.context import FolioContext


@dataclass(frozen=True)
class SiteModel(ModelWithContent):
    """The site itself; its content lives in the content root."""

    kind: ClassVar[ModelKind] = "site"

    context: "FolioContext" = field(repr=False, compare=False)
    root: Path

    def blueprint_name(self) -> str:
        return "site"
