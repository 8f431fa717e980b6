"""Marker reports for a single document (no recursion, no substitution)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import EngineConfig
from .document import FileLoader
from .options import ComponentMarker, ListValue, find_markers
from .resolver import child_path


@dataclass(frozen=True)
class MarkerReport:
    """What the resolver would do with one marker."""

    marker: ComponentMarker
    target: Path | None
    exists: bool

    @property
    def status(self) -> str:
        if self.target is None:
            return "no file"
        return "ok" if self.exists else "missing"

    def describe_options(self) -> str:
        parts = []
        for name, value in self.marker.options.items():
            if isinstance(value, ListValue):
                parts.append(f"{name}=[{', '.join(value.items)}]")
            else:
                parts.append(f"{name}={value}")
        return " ".join(parts)


def describe_markers(
    path: str | Path, config: Optional[EngineConfig] = None
) -> list[MarkerReport] | None:
    """Report the markers of `path`, or None if the document does not exist."""
    config = config or EngineConfig()
    loader = FileLoader(encoding=config.encoding)

    document = loader.load(path)
    if document is None:
        return None

    reports = []
    for marker in find_markers(document.text, tag=config.tag):
        if marker.file is None:
            reports.append(MarkerReport(marker=marker, target=None, exists=False))
            continue
        target = child_path(document.path, marker.file)
        reports.append(
            MarkerReport(marker=marker, target=target, exists=loader.exists(target))
        )
    return reports
