"""Language value objects and the language registry.

A multilingual site stores one content file per language code. Sites
without configured languages use the single-language marker, whose
content files never carry a language suffix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from core.config import FolioConfig
from core.errors import FolioLogicError


@dataclass(frozen=True)
class Language:
    """Translation locale.

    Attributes:
        code: Language code used in content file names.
        is_default: Whether this is the site's default language.
    """

    code: str
    is_default: bool = False

    @property
    def is_single(self) -> bool:
        """Return whether this is the non-multilingual marker."""
        return False


@dataclass(frozen=True)
class SingleLanguage(Language):
    """Marker language for sites without multilingual support."""

    code: str = ""
    is_default: bool = True

    @property
    def is_single(self) -> bool:
        return True


SINGLE_LANGUAGE = SingleLanguage()


class LanguageRegistry:
    """Ordered collection of configured languages."""

    def __init__(self, codes: tuple[str, ...] = (), default_code: str | None = None) -> None:
        if default_code is not None and default_code not in codes:
            raise FolioLogicError(
                f"Default language '{default_code}' is not one of the configured "
                f"languages: {', '.join(codes) or 'none'}."
            )
        default = default_code or (codes[0] if codes else None)
        self._languages = {code: Language(code=code, is_default=code == default) for code in codes}

    @classmethod
    def from_config(cls, config: FolioConfig) -> "LanguageRegistry":
        """Build the registry from configured language codes, default first."""
        return cls(config.languages)

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages.values())

    def __len__(self) -> int:
        return len(self._languages)

    @property
    def is_multilingual(self) -> bool:
        return bool(self._languages)

    def codes(self) -> tuple[str, ...]:
        return tuple(self._languages)

    def default(self) -> Language:
        """Return the default language, or the single-language marker."""
        for language in self._languages.values():
            if language.is_default:
                return language
        return SINGLE_LANGUAGE

    def find(self, code: str) -> Language | None:
        return self._languages.get(code)

    def from_code(self, code: str | None = None) -> Language:
        """Resolve a language code for content access.

        Args:
            code: Language code, ``"default"`` or None for the default.

        Returns:
            Matching language, or the single-language marker on
            non-multilingual sites.

        Raises:
            FolioLogicError: If the code is not configured.
        """
        if not self.is_multilingual:
            return SINGLE_LANGUAGE
        if code is None or code == "default":
            return self.default()
        language = self.find(code)
        if language is None:
            raise FolioLogicError(
                f"Invalid language '{code}'. Configured languages: {', '.join(self.codes())}."
            )
        return language
