"""Advisory editing locks.

A lock is not stored on its own: the changes version of a model carries a
``lock`` field with the editing user's id. The lock is recomputed from
storage on every construction and is active only when that user is not
the authenticated one.
"""

from __future__ import annotations

from datetime import datetime, timezone
import time
from typing import TYPE_CHECKING

from content.version_id import VersionId
from core.constants import LOCK_FIELD

if TYPE_CHECKING:
    from models.model_with_content import ModelWithContent
    from models.users import User, UserRegistry


class Lock:
    """Editing lock state of a model."""

    def __init__(
        self,
        model: "ModelWithContent",
        users: "UserRegistry",
        authenticated: "User | None" = None,
    ) -> None:
        """Derive the lock from the model's changes version.

        Args:
            model: Locked model.
            users: Registry resolving stored user ids.
            authenticated: User to compare against; defaults to the
                currently authenticated user.
        """
        self._model = model
        self._authenticated = authenticated if authenticated is not None else users.current()
        owner: User | None = None
        modified: int | None = None

        changes = model.version(VersionId.CHANGES)
        language = model.language()
        if model.has_changes_version() and changes.exists(language):
            user_id = changes.read(language).get(LOCK_FIELD)
            if user_id:
                owner = users.find(user_id)
            modified = changes.modified(language)

        if owner is None:
            owner = users.current()
            modified = None
        self._user = owner
        self._modified = modified if modified is not None else int(time.time())
        self._is_active = not _same_identity(self._user, self._authenticated)

    def __repr__(self) -> str:
        user_id = self._user.id if self._user is not None else None
        return f"Lock(user={user_id!r}, is_active={self._is_active})"

    @property
    def user(self) -> "User | None":
        return self._user

    def is_active(self) -> bool:
        return self._is_active

    def modified(self, fmt: str | None = None) -> int | str:
        """Return the lock timestamp, optionally formatted with strftime in UTC."""
        if fmt is None:
            return self._modified
        return datetime.fromtimestamp(self._modified, tz=timezone.utc).strftime(fmt)

    def to_dict(self) -> dict[str, object]:
        return {
            "is_active": self._is_active,
            "modified": self._modified,
            "user": {
                "id": self._user.id if self._user is not None else None,
                "email": self._user.email if self._user is not None else None,
            },
        }


def _same_identity(owner: "User | None", authenticated: "User | None") -> bool:
    if owner is None or authenticated is None:
        return owner is None and authenticated is None
    return owner.is_same(authenticated)
