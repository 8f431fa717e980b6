"""Resolver - recursively expands component markers into their documents.

Resolution of one document:
1. Read and normalize the document (missing file -> empty text)
2. Find every component marker
3. For each marker: parse options, resolve the referenced file against
   the document's directory, expand it recursively, substitute the
   options into it and splice it over every copy of the marker text

Nothing is cached: a file included twice is read and resolved twice.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .config import EngineConfig
from .document import Document, FileLoader
from .errors import CircularIncludeError, IncludeDepthError
from .options import ComponentMarker, find_markers
from .substitute import substitute

log = logging.getLogger(__name__)


def child_path(document_path: Path, file: str) -> Path:
    """Resolve a marker's `file` option relative to its document."""
    if file.startswith(("/", os.sep)):
        return Path(file)
    return document_path.parent / file


class Resolver:
    """Expands component markers depth-first.

    With the default config there is no guard against a document that
    includes itself; `max_depth` and `detect_cycles` turn such graphs into
    IncludeDepthError / CircularIncludeError instead.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        loader: Optional[FileLoader] = None,
    ):
        self.config = config or EngineConfig()
        self.loader = loader or FileLoader(encoding=self.config.encoding)

    def resolve(self, path: str | Path) -> str:
        """Return the fully expanded text of `path` ("" if it does not exist)."""
        return self._resolve(Path(path), chain=[])

    def _resolve(self, path: Path, chain: list[Path]) -> str:
        document = self.loader.load(path)
        if document is None:
            return ""

        markers = find_markers(document.text, tag=self.config.tag)
        if not markers:
            return document.text

        chain = chain + [path]
        html = document.text
        for marker in markers:
            html = html.replace(marker.raw_text, self._expand(document, marker, chain))
        return html

    def _expand(
        self, document: Document, marker: ComponentMarker, chain: list[Path]
    ) -> str:
        """Expanded replacement text for one marker ("" drops the marker)."""
        if marker.file is None:
            log.debug(f"{document.path}: dropping marker without file option")
            return ""

        target = child_path(document.path, marker.file)
        if not self.loader.exists(target):
            log.debug(f"{document.path}: dropping marker, {target} not found")
            return ""

        self._check_include(target, chain)
        log.debug(f"{document.path}: including {target}")

        child = self._resolve(target, chain)
        return substitute(child, marker.options, self.config.loop_separator)

    def _check_include(self, target: Path, chain: list[Path]) -> None:
        max_depth = self.config.max_depth
        if max_depth is not None and len(chain) > max_depth:
            raise IncludeDepthError(str(target), max_depth)

        if self.config.detect_cycles:
            key = _identity(target)
            if any(_identity(p) == key for p in chain):
                raise CircularIncludeError([str(p) for p in chain] + [str(target)])


def _identity(path: Path) -> str:
    return os.path.normcase(os.path.abspath(path))


def render(entry_path: str | Path, config: Optional[EngineConfig] = None) -> str:
    """Render an entry document with all of its components expanded."""
    return Resolver(config).resolve(entry_path)
