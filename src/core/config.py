"""Runtime configuration model for Folio.

This module owns all environment variable parsing and validation.
Storage handlers and models consume a typed config object instead of
raw env reads or global application state.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import re

from core.constants import (
    ACCOUNTS_DIR_NAME,
    DEFAULT_CONTENT_EXTENSION,
    DEFAULT_CONTENT_ROOT,
    DEFAULT_LOG_LEVEL,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import FolioConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}([_-][a-zA-Z0-9]{2,8})?$")
_EXTENSION_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


@dataclass(frozen=True)
class FolioConfig:
    """Validated runtime configuration.

    Attributes:
        content_root: Directory holding site and page content.
        accounts_root: Directory holding one folder per user account.
        blueprints_root: Optional directory with YAML blueprints.
        content_extension: Extension of plain-text content files.
        languages: Configured language codes, default first. Empty for
            single-language sites.
        uuids_enabled: Whether unique identifiers are stored in content.
        locking_enabled: Whether advisory content locks are evaluated.
        log_level: Minimum structured log level.
    """

    content_root: Path
    accounts_root: Path | None = None
    blueprints_root: Path | None = None
    content_extension: str = DEFAULT_CONTENT_EXTENSION
    languages: tuple[str, ...] = ()
    uuids_enabled: bool = True
    locking_enabled: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "FolioConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FolioConfigError: If environment values are invalid.
        """
        content_root_value = os.getenv("FOLIO_CONTENT_ROOT", str(DEFAULT_CONTENT_ROOT))
        return cls(
            content_root=Path(content_root_value).expanduser().resolve(),
            accounts_root=_optional_path(os.getenv("FOLIO_ACCOUNTS_ROOT")),
            blueprints_root=_optional_path(os.getenv("FOLIO_BLUEPRINTS_ROOT")),
            content_extension=parse_content_extension(
                os.getenv("FOLIO_CONTENT_EXTENSION", DEFAULT_CONTENT_EXTENSION)
            ),
            languages=parse_languages(os.getenv("FOLIO_LANGUAGES", "")),
            uuids_enabled=_parse_flag("FOLIO_UUIDS", os.getenv("FOLIO_UUIDS", "true")),
            locking_enabled=_parse_flag(
                "FOLIO_CONTENT_LOCKING", os.getenv("FOLIO_CONTENT_LOCKING", "true")
            ),
            log_level=parse_log_level(os.getenv("FOLIO_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )

    @property
    def resolved_accounts_root(self) -> Path:
        """Return the accounts directory, next to the content root by default."""
        if self.accounts_root is not None:
            return self.accounts_root
        return self.content_root.parent / ACCOUNTS_DIR_NAME


def _optional_path(raw_value: str | None) -> Path | None:
    if not raw_value:
        return None
    return Path(raw_value).expanduser().resolve()


def parse_content_extension(raw_value: str) -> str:
    """Parse the content file extension value.

    Args:
        raw_value: Raw extension, with or without a leading dot.

    Returns:
        Extension without leading dot.

    Raises:
        FolioConfigError: If the extension contains separators or dots.
    """
    extension = raw_value.strip().lstrip(".")
    if not _EXTENSION_PATTERN.match(extension):
        raise FolioConfigError(
            "Invalid FOLIO_CONTENT_EXTENSION value: "
            f"expected alphanumeric extension, got '{raw_value}'. "
            "Use a plain extension such as 'txt' or 'md'."
        )
    return extension


def parse_languages(raw_value: str) -> tuple[str, ...]:
    """Parse a comma separated language code list.

    Args:
        raw_value: Raw list such as ``"en,de"``.

    Returns:
        Ordered unique codes, default language first.

    Raises:
        FolioConfigError: If a code is malformed or repeated.
    """
    codes = [code.strip() for code in raw_value.split(",") if code.strip()]
    for code in codes:
        if not _LANGUAGE_CODE_PATTERN.match(code):
            raise FolioConfigError(
                f"Invalid language code '{code}' in FOLIO_LANGUAGES. "
                "Use ISO codes such as 'en' or 'pt-br'."
            )
    if len(set(codes)) != len(codes):
        raise FolioConfigError(
            f"Duplicate language codes in FOLIO_LANGUAGES: '{raw_value}'. "
            "List each language once."
        )
    return tuple(codes)


def parse_log_level(raw_value: str) -> str:
    """Parse and validate the log level value."""
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise FolioConfigError(
            f"Invalid FOLIO_LOG_LEVEL value '{raw_value}'. "
            f"Supported: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _parse_flag(name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        name: Environment variable name for error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        FolioConfigError: If value is not a recognized boolean.
    """
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise FolioConfigError(
        f"Invalid {name} value: expected boolean, got '{raw_value}'. "
        f"Use one of: {', '.join(_TRUE_VALUES + _FALSE_VALUES)}."
    )
