"""Unit tests for blueprint conversion of model content."""

from __future__ import annotations

import pytest

from content.model_content import ModelContent, convert_fields
from core.errors import FolioLogicError
from models.blueprint import Blueprint, BlueprintField


def test_convert_fields_keeps_matching_and_preserves_unknown() -> None:
    """Matching fields keep values, new fields get defaults, extras survive."""
    old = Blueprint(
        name="pages/a",
        fields=(BlueprintField(name="title"), BlueprintField(name="color")),
    )
    new = Blueprint(
        name="pages/b",
        fields=(BlueprintField(name="title"), BlueprintField(name="size", default="M")),
    )

    converted = convert_fields({"title": "A", "color": "red"}, old, new)

    assert converted == {"title": "A", "color": "red", "size": "M"}


def test_convert_fields_uses_default_when_type_changes() -> None:
    """A field whose type changed should take the new default."""
    old = Blueprint(name="pages/a", fields=(BlueprintField(name="text", type="textarea"),))
    new = Blueprint(
        name="pages/b",
        fields=(BlueprintField(name="text", type="blocks", default="[]"),),
    )

    converted = convert_fields({"text": "Plain body"}, old, new)

    assert converted == {"text": "[]"}


def test_convert_to_resolves_sibling_blueprint(context) -> None:
    """convert_to should look the target up next to the model blueprint."""
    page = context.page("blog/hello", template="article")
    content = ModelContent(
        {"title": "Hello", "text": "Body", "color": "red"},
        model=page,
    )

    converted = content.convert_to("product")

    assert converted == {"title": "Hello", "text": "[]", "color": "red", "size": "M"}


def test_convert_to_does_not_mutate_content(context) -> None:
    """Conversion should be a pure transform."""
    page = context.page("blog/hello", template="article")
    content = ModelContent({"title": "Hello"}, model=page)

    content.convert_to("product")

    assert content.data == {"title": "Hello"}


def test_convert_to_without_model_raises() -> None:
    """Unbound content cannot be converted."""
    content = ModelContent({"title": "Hello"})

    with pytest.raises(FolioLogicError):
        content.convert_to("product")

    assert content.data == {"title": "Hello"}
