"""Render command - expand an entry document"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from tagweave.lib.errors import handle_error
from tagweave.lib.resolver import Resolver
from tagweave.lib.workspace import load_engine_config

log = logging.getLogger(__name__)


def render_command(
    entry: Path,
    output: Optional[Path] = None,
    config_path: Optional[Path] = None,
    max_depth: Optional[int] = None,
    detect_cycles: Optional[bool] = None,
) -> None:
    """Render `entry` to stdout or to `output`."""
    try:
        config = load_engine_config(config_path).with_overrides(
            max_depth=max_depth, detect_cycles=detect_cycles
        )
        if not entry.is_file():
            log.info(f"Entry document not found: {entry}")

        text = Resolver(config).resolve(entry)
    except Exception as e:
        handle_error(e)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        log.info(f"Wrote {output}")
    else:
        typer.echo(text, nl=False)
