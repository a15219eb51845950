"""Unit tests for shared model behavior."""

from __future__ import annotations

from dataclasses import replace

import pytest

from content.version_id import VersionId
from core.errors import FolioLogicError
from models.context import FolioContext


def test_save_then_content_round_trips_fields(context) -> None:
    """Saved fields should be readable through the model."""
    page = context.page("about")

    page.save({"Title": "About", "text": "Hello"})

    assert page.content().to_dict() == {"title": "About", "text": "Hello"}


def test_save_merges_unless_overwrite(context) -> None:
    """Saves merge with stored fields and overwrite replaces them."""
    page = context.page("about")
    page.save({"title": "About", "text": "Hello"})

    page.save({"text": "Updated"})
    merged = page.content().to_dict()
    page.save({"text": "Only"}, overwrite=True)

    assert merged == {"title": "About", "text": "Updated"} and page.content().to_dict() == {
        "text": "Only"
    }


def test_content_of_unwritten_model_is_empty(context) -> None:
    """Reading a model without content file should yield empty content."""
    page = context.page("missing")

    content = page.content()

    assert content.to_dict() == {} and content.model == page


def test_draft_page_saves_into_draft_root(context) -> None:
    """Drafts should be written in place and expose no changes version."""
    draft = context.page("blog/upcoming", draft=True)

    draft.save({"title": "Soon"})

    assert (
        (draft.root / "default.txt").is_file()
        and draft.content().get("title").value == "Soon"
        and not draft.has_changes_version()
    )


def test_draft_page_changes_version_raises_logic_error(context) -> None:
    """Saving pending changes for a draft should be rejected."""
    draft = context.page("blog/upcoming", draft=True)

    with pytest.raises(FolioLogicError) as error_info:
        draft.version(VersionId.CHANGES).save(draft.language(), {"title": "Soon"})

    assert "changes file" in str(error_info.value) and not draft.root.exists()


def test_draft_page_lock_is_inactive(context) -> None:
    """Drafts have no changes file, so their lock belongs to the current user."""
    draft = context.page("blog/upcoming", draft=True)
    draft.save({"title": "Soon", "lock": "bob"})

    assert not draft.is_locked()


def test_lock_is_none_when_locking_disabled(context) -> None:
    """Disabled locking should never report a lock."""
    config = replace(context.config, locking_enabled=False)
    unlocked = FolioContext.from_config(config, users=context.users, blueprints=context.blueprints)
    page = unlocked.page("about")
    page.save({"title": "About"})

    assert page.lock() is None and not page.is_locked()


def test_lock_is_none_without_content_directory(context) -> None:
    """Models whose folder does not exist cannot be locked."""
    page = context.page("missing")

    assert page.lock() is None


def test_is_locked_when_other_user_holds_changes(context) -> None:
    """A changes file locked by another user should lock the model."""
    page = context.page("about")
    page.save({"title": "About"})
    page.version(VersionId.CHANGES).create(page.language(), {"lock": "bob"})

    assert page.is_locked()


def test_single_language_has_one_translation(context) -> None:
    """Single-language installs expose exactly one translation."""
    page = context.page("about")

    translations = page.translations()

    assert len(translations) == 1 and translations[0].code == ""


def test_multilang_has_translation_per_language(multilang_context) -> None:
    """Multi-language installs expose one translation per language."""
    page = multilang_context.page("about")

    codes = [translation.code for translation in page.translations()]

    assert codes == ["en", "de"]


def test_convert_page_rewrites_every_translation(multilang_context) -> None:
    """Converting a page should move each translation to the new template file."""
    page = multilang_context.page("blog/hello", template="article")
    page.save({"title": "Hello", "text": "Body", "color": "red"}, "en")
    page.save({"title": "Hallo"}, "de")

    converted = page.convert_to("product")

    assert (
        converted.template == "product"
        and not (page.root / "article.en.txt").exists()
        and not (page.root / "article.de.txt").exists()
        and converted.content("en").to_dict()
        == {"title": "Hello", "text": "[]", "color": "red", "size": "M"}
        and converted.content("de").to_dict() == {"title": "Hallo", "text": "[]", "size": "M"}
    )


def test_convert_file_updates_template_field(context) -> None:
    """Converting a file should store the new template in its content."""
    image = context.file(context.site(), "photo.jpg", template="image")
    image.save({"alt": "A photo"})

    converted = image.convert_to("cover")

    assert converted.content().to_dict() == {
        "alt": "A photo",
        "template": "cover",
        "focus": "center",
    }


def test_convert_skips_missing_translations(multilang_context) -> None:
    """Only translations with stored content should be converted."""
    page = multilang_context.page("blog/hello", template="article")
    page.save({"title": "Hello"}, "en")

    converted = page.convert_to("product")

    assert converted.translation("en").exists() and not converted.translation("de").exists()


def test_site_cannot_change_blueprint(context) -> None:
    """Only pages and files support conversion."""
    site = context.site()

    with pytest.raises(FolioLogicError):
        site.convert_to("other")

    assert site.blueprint().name == "site"
