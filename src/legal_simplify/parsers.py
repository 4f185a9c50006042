"""Plain-text document loading.

Files are read whole and decoded as UTF-8, replacing undecodable bytes.
Content is never validated: a binary file still loads, it just reads as
noise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


@dataclass
class ParsedDocument:
    """The text of a loaded document and where it came from."""

    filename: str
    text: str


def decode_upload(data: bytes | str, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode raw uploaded content to text."""
    if isinstance(data, str):
        return data
    return data.decode(encoding, errors="replace")


def read_text_document(path: str | Path, encoding: str = DEFAULT_ENCODING) -> ParsedDocument:
    """Read a plain-text document from *path*.

    Raises:
        FileNotFoundError: If the file does not exist.
        IsADirectoryError: If *path* is a directory.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Not a file: {path}")

    raw = path.read_bytes()
    text = decode_upload(raw, encoding)
    logger.info("Loaded %s (%d bytes)", path.name, len(raw))
    return ParsedDocument(filename=path.name, text=text)
