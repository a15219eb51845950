"""Unit tests for languages, version ids and the language registry."""

from __future__ import annotations

import pytest

from content.language import SINGLE_LANGUAGE, Language, LanguageRegistry
from content.version_id import VersionId
from core.errors import FolioLogicError


def test_registry_marks_first_code_as_default() -> None:
    """First configured code should be the default language."""
    registry = LanguageRegistry(("en", "de"))

    assert registry.default() == Language(code="en", is_default=True)


def test_registry_honors_explicit_default() -> None:
    """An explicit default code should override list order."""
    registry = LanguageRegistry(("en", "de"), default_code="de")

    assert registry.default().code == "de" and not registry.find("en").is_default


def test_from_code_returns_single_language_without_languages() -> None:
    """Non-multilingual registries should always resolve the marker."""
    registry = LanguageRegistry()

    assert registry.from_code("en") is SINGLE_LANGUAGE and registry.from_code() is SINGLE_LANGUAGE


def test_from_code_resolves_default_alias() -> None:
    """None and 'default' should both resolve the default language."""
    registry = LanguageRegistry(("en", "de"))

    assert registry.from_code(None) == registry.from_code("default") == registry.find("en")


def test_from_code_raises_for_unknown_code() -> None:
    """Unknown codes on multilingual sites should be rejected."""
    registry = LanguageRegistry(("en", "de"))

    with pytest.raises(FolioLogicError):
        registry.from_code("fr")

    assert registry.codes() == ("en", "de")


def test_single_language_is_default_and_distinct() -> None:
    """The marker should be default and differ from an empty-code language."""
    assert (
        SINGLE_LANGUAGE.is_default
        and SINGLE_LANGUAGE.is_single
        and SINGLE_LANGUAGE != Language(code="", is_default=True)
    )


def test_version_id_from_value_accepts_strings() -> None:
    """Version ids should resolve from their string values."""
    assert VersionId.from_value("Changes") is VersionId.CHANGES


def test_version_id_from_value_rejects_unknown() -> None:
    """Unknown version ids should raise a logic error."""
    with pytest.raises(FolioLogicError):
        VersionId.from_value("draft")

    assert len(VersionId) == 2
