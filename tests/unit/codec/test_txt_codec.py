"""Unit tests for the plain-text field codec."""

from __future__ import annotations

import pytest

from codec.txt_codec import decode, encode, encode_value, normalize_key
from core.errors import FolioCodecError


def test_encode_writes_capitalized_keys_and_separators() -> None:
    """Fields should be written as Key: value blocks."""
    text = encode({"title": "Hello", "slug": "hello"})

    assert text == "Title: Hello\n\n----\n\nSlug: hello"


def test_encode_skips_none_values() -> None:
    """None marks a deleted field and should not be written."""
    text = encode({"title": "Hello", "color": None})

    assert "Color" not in text


def test_encode_puts_multiline_values_below_key() -> None:
    """Multi-line values should start on the line after the key."""
    text = encode({"text": "line one\nline two"})

    assert text == "Text:\n\nline one\nline two"


def test_decode_lowercases_keys_and_trims_values() -> None:
    """Decoded keys should be lower-cased with dashes turned into underscores."""
    fields = decode("Title:   Hello  \n\n----\n\nMeta-Description: Short")

    assert fields == {"title": "Hello", "meta_description": "Short"}


def test_separator_lines_in_values_are_escaped() -> None:
    """A value line starting with ---- should not split the field."""
    original = {"text": "intro\n----\noutro", "title": "Escapes"}

    decoded = decode(encode(original))

    assert decoded == original


def test_decode_ignores_blocks_without_key() -> None:
    """Blocks without a colon should be skipped."""
    fields = decode("no key here\n\n----\n\nTitle: Kept")

    assert fields == {"title": "Kept"}


def test_decode_handles_windows_line_endings_and_bom() -> None:
    """CRLF files with byte order mark should decode like LF files."""
    fields = decode("\ufeffTitle: Hello\r\n\r\n----\r\n\r\nText: World")

    assert fields == {"title": "Hello", "text": "World"}


def test_encode_value_dumps_lists_as_yaml() -> None:
    """Structured values should be serialized as YAML."""
    value = encode_value(["a", "b"])

    assert value == "- a\n- b"


def test_encode_value_stringifies_scalars() -> None:
    """Numbers and booleans should be written as plain text."""
    assert (encode_value(3), encode_value(True), encode_value(1.5)) == ("3", "true", "1.5")


def test_encode_rejects_keys_with_colons() -> None:
    """Keys containing the key separator cannot be represented."""
    with pytest.raises(FolioCodecError) as error_info:
        encode({"bad:key": "value"})

    assert "bad:key" in str(error_info.value)


def test_normalize_key_matches_decoded_key() -> None:
    """Folding a key should give the name decoding produces."""
    decoded = decode("My-Field Name: x")

    assert normalize_key("My-Field Name") == "my_field_name" and list(decoded) == ["my_field_name"]
