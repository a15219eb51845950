"""Shared typed aliases.

This module defines the field map shapes exchanged between the storage
handlers, the plain-text codec and the content layer.
"""

from __future__ import annotations

from typing import Union

FieldValue = Union[str, None]
ContentFields = dict[str, FieldValue]
