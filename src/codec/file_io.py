"""Content file I/O helpers.

Reads translate a missing file into FolioNotFoundError, every other OS
failure into FolioIOError. Writes go to a temporary sibling file which is
then renamed over the target, so readers never observe partial content.
"""

from __future__ import annotations

import os
from pathlib import Path
import tempfile
from typing import Mapping

from codec.txt_codec import decode, encode
from core.errors import FolioIOError, FolioNotFoundError
from core.types import ContentFields


def read_fields(content_file: Path) -> ContentFields:
    """Read and decode one content file.

    Args:
        content_file: Absolute content file path.

    Returns:
        Decoded field map.

    Raises:
        FolioNotFoundError: If the file does not exist.
        FolioIOError: If the file cannot be read.
    """
    try:
        text = content_file.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise FolioNotFoundError(
            f"Content file not found at {content_file}. Create the version before reading it."
        ) from error
    except OSError as error:
        raise FolioIOError(f"Failed to read content file {content_file}: {error}.") from error
    return decode(text)


def write_fields(content_file: Path, fields: Mapping[str, object]) -> None:
    """Encode and atomically write one content file."""
    write_text_atomic(content_file, encode(fields))


def write_text_atomic(target: Path, text: str) -> None:
    """Write text through a temporary file and rename it over the target.

    Args:
        target: Destination path. Parent directories are created.
        text: File contents.

    Raises:
        FolioIOError: If any step of the write fails.
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        descriptor, temp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
    except OSError as error:
        raise FolioIOError(f"Could not prepare content file {target}: {error}.") from error
    temp_path = Path(temp_name)
    try:
        with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(temp_path, target)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise FolioIOError(f"Could not write the content file {target}: {error}.") from error
