"""Folio exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Storage callers rely on NotFound being distinct from every other failure.
"""

from __future__ import annotations


class FolioError(Exception):
    """Base exception for all Folio failures."""


class FolioConfigError(FolioError):
    """Raised for invalid runtime configuration."""


class FolioNotFoundError(FolioError):
    """Raised when a version/language content slot does not exist."""


class FolioLogicError(FolioError):
    """Raised for structurally invalid storage requests."""


class FolioIOError(FolioError):
    """Raised when a filesystem operation fails for reasons other than absence."""


class FolioBlueprintError(FolioError):
    """Raised for unreadable or malformed blueprint definitions."""


class FolioCodecError(FolioError):
    """Raised when a content file cannot be encoded or decoded."""
