"""Integration tests for editing, locking and publishing content."""

from __future__ import annotations

from dataclasses import replace

from folio import FolioConfig, FolioContext, User, UserRegistry, VersionId


def _write_blueprints(root) -> None:
    pages = root / "pages"
    pages.mkdir(parents=True)
    (pages / "default.yml").write_text("fields:\n  text:\n    type: textarea\n", encoding="utf-8")
    (pages / "article.yml").write_text(
        "title: Article\n"
        "fields:\n"
        "  title: {}\n"
        "  text:\n"
        "    type: textarea\n"
        "  color:\n"
        "    translate: false\n",
        encoding="utf-8",
    )


def test_edit_lock_and_publish_flow(tmp_path) -> None:
    """Changes should lock the page for others and publish into the live file."""
    _write_blueprints(tmp_path / "blueprints")
    config = replace(
        FolioConfig.from_env(),
        content_root=tmp_path / "content",
        accounts_root=tmp_path / "accounts",
        blueprints_root=tmp_path / "blueprints",
        languages=("en", "de"),
    )
    users = UserRegistry(
        (User(id="alice", email="alice@example.com"), User(id="bob", email="bob@example.com")),
        current_user_id="bob",
    )
    context = FolioContext.from_config(config, users=users)
    page = context.page("blog/hello", template="article")
    page.save({"title": "Hello", "color": "red"}, "en")
    page.save({"title": "Hallo", "color": "blau"}, "de")
    english = page.language("en")
    changes = page.version(VersionId.CHANGES)

    changes.save(english, {"title": "Hello again", "lock": "alice"})
    locked_for_bob = page.is_locked()
    changes.publish(english)

    assert (
        locked_for_bob
        and not changes.exists(english)
        and page.content("en").get("title").value == "Hello again"
        and page.content("de").to_dict() == {"title": "Hallo"}
        and (config.content_root / "blog" / "hello" / "article.en.txt").is_file()
    )


def test_draft_content_lives_in_drafts_folder(tmp_path) -> None:
    """A draft is edited in place and has no changes version."""
    config = replace(FolioConfig.from_env(), content_root=tmp_path / "content")
    context = FolioContext.from_config(config)
    draft = context.page("notes/idea", draft=True)

    draft.save({"title": "Idea", "text": "Sketch"})
    stored = (config.content_root / "notes" / "_drafts" / "idea" / "default.txt").read_text(
        encoding="utf-8"
    )

    assert (
        stored == "Title: Idea\n\n----\n\nText: Sketch"
        and draft.content().get("text").value == "Sketch"
        and not (draft.root / "_changes").exists()
    )
