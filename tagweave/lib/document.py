"""Documents and the filesystem primitives the resolver relies on."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

BOM = "\ufeff"


@dataclass(frozen=True)
class Document:
    """A unit of text content identified by its file path."""

    path: Path
    text: str


def normalize_encoding(raw: bytes, encoding: str = "utf-8") -> str:
    """Decode raw file content into text.

    Undecodable bytes become U+FFFD instead of failing, and a leading
    byte-order mark is dropped.
    """
    text = raw.decode(encoding, errors="replace")
    if text.startswith(BOM):
        text = text[len(BOM):]
    return text


class FileLoader:
    """Reads documents from the local filesystem (read-only, uncached)."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read(self, path: Path) -> bytes:
        return path.read_bytes()

    def normalize(self, raw: bytes) -> str:
        return normalize_encoding(raw, self.encoding)

    def load(self, path: str | Path) -> Document | None:
        """Read and normalize `path`, or None if there is no such file."""
        path = Path(path)
        if not self.exists(path):
            log.debug(f"Document not found: {path}")
            return None
        return Document(path=path, text=self.normalize(self.read(path)))
