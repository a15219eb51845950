"""Key-value text encoding for content files.

Fields are written as ``Key: value`` blocks separated by a ``----`` line.
Multi-line values start on the line after the key, and value lines that
begin with ``----`` are escaped with a backslash so they never split a
field. Values of ``None`` are omitted, which is how a field is deleted.
"""

from __future__ import annotations

import re
from typing import Mapping

import yaml

from core.constants import FIELD_SEPARATOR
from core.errors import FolioCodecError
from core.types import ContentFields

_SPLIT_PATTERN = re.compile(r"\n----\s*\n*")
_ESCAPE_PATTERN = re.compile(r"^----", re.MULTILINE)
_UNESCAPE_PATTERN = re.compile(r"^\\----", re.MULTILINE)


def encode(fields: Mapping[str, object]) -> str:
    """Encode a field map into content file text.

    Args:
        fields: Field names mapped to values. ``None`` values are skipped.

    Returns:
        Encoded text.

    Raises:
        FolioCodecError: If a key cannot be represented in the format.
    """
    blocks: list[str] = []
    for key, value in fields.items():
        if not key or value is None:
            continue
        _validate_key(key)
        encoded_key = key[:1].upper() + key[1:]
        encoded_value = encode_value(value)
        separator = "\n\n" if "\n" in encoded_value else " "
        blocks.append(f"{encoded_key}:{separator}{encoded_value}".rstrip())
    return FIELD_SEPARATOR.join(blocks)


def encode_value(value: object) -> str:
    """Encode a single field value into its text form.

    Lists and mappings are dumped as YAML, other scalars are stringified.
    """
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (list, tuple, dict)):
        text = yaml.safe_dump(
            list(value) if isinstance(value, tuple) else value,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    else:
        text = str(value)
    text = text.replace("\r\n", "\n").strip()
    return _ESCAPE_PATTERN.sub(r"\\----", text)


def decode(text: str) -> ContentFields:
    """Decode content file text into a lower-cased field map.

    Args:
        text: Raw file contents.

    Returns:
        Field names mapped to string values.
    """
    normalized = text.lstrip("\ufeff").replace("\r\n", "\n")
    fields: ContentFields = {}
    for block in _SPLIT_PATTERN.split(normalized):
        if not block.strip():
            continue
        position = block.find(":")
        if position <= 0:
            continue
        key = _decode_key(block[:position])
        if not key:
            continue
        value = block[position + 1 :].strip()
        fields[key] = _UNESCAPE_PATTERN.sub("----", value)
    return fields


def normalize_key(key: str) -> str:
    """Fold a field name into the form decoding produces."""
    return key.lower().replace("-", "_").replace(" ", "_")


def _decode_key(raw_key: str) -> str:
    return normalize_key(raw_key.strip())


def _validate_key(key: str) -> None:
    if ":" in key or "\n" in key or key.strip() != key:
        raise FolioCodecError(
            f"Cannot encode field name {key!r}: names must not contain ':', "
            "line breaks or surrounding whitespace. Rename the field."
        )
