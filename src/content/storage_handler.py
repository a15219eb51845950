"""Storage contract for versioned content.

Every operation is keyed by a version id and a language. Callers treat
FolioNotFoundError from ``update`` as the only signal to fall back to
``create``.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from content.language import Language
from content.version_id import VersionId
from core.types import ContentFields


class ContentStorageHandler(Protocol):
    """Contract implemented by content storage backends."""

    def create(self, version_id: VersionId, language: Language, fields: Mapping[str, object]) -> None:
        """Create a version, replacing any existing content."""

    def delete(self, version_id: VersionId, language: Language) -> None:
        """Delete a version; succeeds when it is already absent."""

    def exists(self, version_id: VersionId, language: Language) -> bool:
        """Return whether the version exists."""

    def modified(self, version_id: VersionId, language: Language) -> int | None:
        """Return the modification timestamp, or None when absent."""

    def move(
        self,
        from_version_id: VersionId,
        from_language: Language,
        to_version_id: VersionId,
        to_language: Language,
    ) -> None:
        """Relocate content from one version/language slot to another."""

    def read(self, version_id: VersionId, language: Language) -> ContentFields:
        """Return stored fields; raises FolioNotFoundError when absent."""

    def touch(self, version_id: VersionId, language: Language) -> None:
        """Update the modification time; raises FolioNotFoundError when absent."""

    def update(self, version_id: VersionId, language: Language, fields: Mapping[str, object]) -> None:
        """Replace stored fields; raises FolioNotFoundError when absent."""
