"""Core constants used across Folio modules.

This module centralizes storage layout names and field keys.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONTENT_ROOT = Path("content")
DEFAULT_CONTENT_EXTENSION = "txt"
DEFAULT_LOG_LEVEL = "info"
ACCOUNTS_DIR_NAME = "accounts"
CHANGES_DIR_NAME = "_changes"
DRAFTS_DIR_NAME = "_drafts"
SITE_FILE_STEM = "site"
USER_FILE_STEM = "user"
DEFAULT_BLUEPRINT_NAME = "default"
DEFAULT_FIELD_TYPE = "text"
BLUEPRINT_FILE_SUFFIX = ".yml"
FIELD_SEPARATOR = "\n\n----\n\n"
LOCK_FIELD = "lock"
UUID_FIELD = "uuid"
TITLE_FIELD = "title"
SLUG_FIELD = "slug"
TEMPLATE_FIELD = "template"
USER_IDENTITY_FIELDS = ("email", "language", "name", "password", "role")
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
