"""Markers command - list the component markers of a document"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from tagweave.lib.errors import exit_with_error, handle_error
from tagweave.lib.report import describe_markers
from tagweave.lib.workspace import load_engine_config

from .utils import console


def markers_command(entry: Path, config_path: Optional[Path] = None) -> None:
    """Print a table of the markers found in `entry`."""
    try:
        config = load_engine_config(config_path)
        reports = describe_markers(entry, config)
    except Exception as e:
        handle_error(e)

    if reports is None:
        exit_with_error(f"File not found: {entry}")

    if not reports:
        console.print("[yellow]No markers found[/yellow]")
        raise typer.Exit()

    table = Table()
    table.add_column("#", style="dim")
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Options")

    status_colors = {"ok": "green", "missing": "red", "no file": "yellow"}

    for index, report in enumerate(reports, start=1):
        color = status_colors[report.status]
        options = report.describe_options()
        if len(options) > 60:
            options = options[:57] + "..."
        table.add_row(
            str(index),
            str(report.target) if report.target is not None else "-",
            f"[{color}]{report.status}[/{color}]",
            options,
        )

    console.print(table)
