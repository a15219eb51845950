"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Every Folio module logs snake_case events with keyword fields.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL

_CONFIGURED = False


def configure_logging(log_level: str | None = None) -> None:
    """Configure structlog processors and level filtering.

    Args:
        log_level: Minimum level name. Defaults to FOLIO_LOG_LEVEL.
    """
    global _CONFIGURED
    level_name = (log_level or os.getenv("FOLIO_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not _CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)
