"""Unit tests for content file I/O helpers."""

from __future__ import annotations

import pytest

from codec.file_io import read_fields, write_fields, write_text_atomic
from core.errors import FolioNotFoundError


def test_write_fields_creates_parent_directories(tmp_path) -> None:
    """Writing should create missing directories."""
    target = tmp_path / "a" / "b" / "page.txt"

    write_fields(target, {"title": "Nested"})

    assert read_fields(target) == {"title": "Nested"}


def test_read_fields_raises_not_found_for_missing_file(tmp_path) -> None:
    """A missing file should be reported as not found."""
    with pytest.raises(FolioNotFoundError):
        read_fields(tmp_path / "missing.txt")

    assert not (tmp_path / "missing.txt").exists()


def test_write_text_atomic_leaves_no_temporary_files(tmp_path) -> None:
    """Atomic writes should rename the temporary file over the target."""
    target = tmp_path / "site.txt"

    write_text_atomic(target, "Title: One")
    write_text_atomic(target, "Title: Two")

    assert [item.name for item in tmp_path.iterdir()] == ["site.txt"] and (
        target.read_text(encoding="utf-8") == "Title: Two"
    )
