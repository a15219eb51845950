"""Pytest configuration and shared content fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from core.config import FolioConfig  # noqa: E402
from models.blueprint import Blueprint, BlueprintField, BlueprintRegistry  # noqa: E402
from models.context import FolioContext  # noqa: E402
from models.users import User, UserRegistry  # noqa: E402


def sample_blueprints() -> BlueprintRegistry:
    """Build the blueprints used across content tests."""
    return BlueprintRegistry(
        blueprints={
            "pages/default": Blueprint(
                name="pages/default",
                fields=(BlueprintField(name="text", type="textarea"),),
            ),
            "pages/article": Blueprint(
                name="pages/article",
                fields=(
                    BlueprintField(name="title", type="text"),
                    BlueprintField(name="text", type="textarea"),
                    BlueprintField(name="color", type="text", translate=False),
                ),
            ),
            "pages/product": Blueprint(
                name="pages/product",
                fields=(
                    BlueprintField(name="title", type="text"),
                    BlueprintField(name="text", type="blocks", default="[]"),
                    BlueprintField(name="size", type="text", default="M"),
                ),
            ),
            "site": Blueprint(
                name="site",
                fields=(BlueprintField(name="copyright", type="text", translate=False),),
            ),
            "files/image": Blueprint(
                name="files/image",
                fields=(BlueprintField(name="alt", type="text"),),
            ),
            "files/cover": Blueprint(
                name="files/cover",
                fields=(
                    BlueprintField(name="alt", type="text"),
                    BlueprintField(name="focus", type="text", default="center"),
                ),
            ),
        }
    )


def sample_users() -> UserRegistry:
    """Build a registry with two editors, alice authenticated."""
    return UserRegistry(
        users=(
            User(id="alice", email="alice@example.com", name="Alice", role="editor"),
            User(id="bob", email="bob@example.com", name="Bob", role="editor"),
        ),
        current_user_id="alice",
    )


@pytest.fixture
def config(tmp_path: Path) -> FolioConfig:
    """Single-language config rooted in the test directory."""
    return FolioConfig(
        content_root=tmp_path / "content",
        accounts_root=tmp_path / "accounts",
    )


@pytest.fixture
def context(config: FolioConfig) -> FolioContext:
    """Single-language context with sample users and blueprints."""
    return FolioContext.from_config(
        config, users=sample_users(), blueprints=sample_blueprints()
    )


@pytest.fixture
def multilang_context(tmp_path: Path) -> FolioContext:
    """Context with English as default and German as second language."""
    config = FolioConfig(
        content_root=tmp_path / "content",
        accounts_root=tmp_path / "accounts",
        languages=("en", "de"),
    )
    return FolioContext.from_config(
        config, users=sample_users(), blueprints=sample_blueprints()
    )
