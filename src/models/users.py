"""User identities and the user registry.

Locks store a user id inside content; the registry resolves those ids
back to users and tracks who is currently authenticated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from core.errors import FolioLogicError


@dataclass(frozen=True)
class User:
    """Account identity.

    Attributes:
        id: Stable user id stored in lock markers.
        email: Login email address.
        name: Display name.
        role: Role name, selects the user blueprint.
    """

    id: str
    email: str | None = None
    name: str | None = None
    role: str = "default"

    def is_same(self, other: "User | None") -> bool:
        """Return whether both refer to the same account."""
        return other is not None and other.id == self.id


class UserRegistry:
    """In-memory user lookup with an authenticated user slot."""

    def __init__(self, users: Iterable[User] = (), current_user_id: str | None = None) -> None:
        self._users = {user.id: user for user in users}
        self._current_id: str | None = None
        if current_user_id is not None:
            self.impersonate(current_user_id)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users.values())

    def __len__(self) -> int:
        return len(self._users)

    def add(self, user: User) -> None:
        self._users[user.id] = user

    def find(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def current(self) -> User | None:
        """Return the authenticated user, if any."""
        if self._current_id is None:
            return None
        return self._users.get(self._current_id)

    def impersonate(self, user_id: str | None) -> User | None:
        """Switch the authenticated user; None logs out.

        Raises:
            FolioLogicError: If the user id is unknown.
        """
        if user_id is None:
            self._current_id = None
            return None
        user = self._users.get(user_id)
        if user is None:
            raise FolioLogicError(
                f"Cannot authenticate unknown user '{user_id}'. Register the user first."
            )
        self._current_id = user_id
        return user
