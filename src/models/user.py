"""User model: account content stored in the account folder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from core.constants import DEFAULT_BLUEPRINT_NAME
from models.model_with_content import ModelKind, ModelWithContent
from models.users import User

if TYPE_CHECKING:
    from models.context import FolioContext


@dataclass(frozen=True)
class UserModel(ModelWithContent):
    """Content of one user account.

    Identity fields (email, name, role, ...) belong to ``user`` and are
    never written to the content file.
    """

    kind: ClassVar[ModelKind] = "user"

    context: "FolioContext" = field(repr=False, compare=False)
    root: Path
    user: User

    def blueprint_name(self) -> str:
        return f"users/{self.user.role}"

    def blueprint_fallback(self) -> str | None:
        return f"users/{DEFAULT_BLUEPRINT_NAME}"
