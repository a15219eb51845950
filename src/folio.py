"""Public SDK surface for Folio.

This module provides a stable import path for library users.
It re-exports the context, model kinds and content versioning types.
"""

from __future__ import annotations

from content.content import Content
from content.field import Field
from content.language import SINGLE_LANGUAGE, Language, LanguageRegistry, SingleLanguage
from content.lock import Lock
from content.model_content import ModelContent
from content.plain_text_storage import PlainTextContentStorageHandler
from content.storage_handler import ContentStorageHandler
from content.translation import Translation
from content.version import Version
from content.version_id import VersionId
from core.config import FolioConfig
from core.errors import (
    FolioBlueprintError,
    FolioCodecError,
    FolioConfigError,
    FolioError,
    FolioIOError,
    FolioLogicError,
    FolioNotFoundError,
)
from models.blueprint import Blueprint, BlueprintField, BlueprintRegistry
from models.context import FolioContext
from models.file import FileModel
from models.page import PageModel
from models.site import SiteModel
from models.user import UserModel
from models.users import User, UserRegistry

__all__ = [
    "Blueprint",
    "BlueprintField",
    "BlueprintRegistry",
    "Content",
    "ContentStorageHandler",
    "Field",
    "FileModel",
    "FolioBlueprintError",
    "FolioCodecError",
    "FolioConfig",
    "FolioConfigError",
    "FolioContext",
    "FolioError",
    "FolioIOError",
    "FolioLogicError",
    "FolioNotFoundError",
    "Language",
    "LanguageRegistry",
    "Lock",
    "ModelContent",
    "PageModel",
    "PlainTextContentStorageHandler",
    "SINGLE_LANGUAGE",
    "SingleLanguage",
    "SiteModel",
    "Translation",
    "User",
    "UserModel",
    "UserRegistry",
    "Version",
    "VersionId",
]
