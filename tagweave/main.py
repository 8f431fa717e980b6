"""Tagweave CLI Main Entry Point

Tagweave - file-based component templates.
Expands <Component file={...} /> markers recursively and fills %name%
placeholders in the included documents.

Usage:
    tagweave render page.html             # Render to stdout
    tagweave render page.html -o out.html # Render to file
    tagweave markers page.html            # Show the markers of one document
    tagweave init                         # Write a starter tagweave.yaml
    tagweave -V                           # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import init_command, markers_command, render_command
from .commands.utils import setup_logging

typer_app = typer.Typer(no_args_is_help=True, add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tagweave {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """File-based component templating engine."""


@typer_app.command()
def render(
    entry: Path = typer.Argument(..., help="Entry document to render."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the result to a file instead of stdout."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to tagweave.yaml."
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0, help="Fail when includes nest deeper than this."
    ),
    detect_cycles: bool = typer.Option(
        False, "--detect-cycles", help="Fail on documents that include themselves."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render ENTRY with all component markers expanded.

    \b
    Examples:
        tagweave render site/index.html
        tagweave render site/index.html -o build/index.html
        tagweave render site/index.html --max-depth 10
    """
    setup_logging(verbose)
    render_command(
        entry,
        output=output,
        config_path=config,
        max_depth=max_depth,
        detect_cycles=detect_cycles or None,
    )


@typer_app.command()
def markers(
    entry: Path = typer.Argument(..., help="Document to inspect."),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to tagweave.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """List the component markers of ENTRY and where they point."""
    setup_logging(verbose)
    markers_command(entry, config_path=config)


@typer_app.command()
def init(
    force: bool = typer.Option(
        False, "-f", "--force", help="Overwrite an existing tagweave.yaml."
    ),
    tag: Optional[str] = typer.Option(None, "--tag", help="Component tag name."),
) -> None:
    """Write a starter tagweave.yaml in the current directory."""
    setup_logging()
    init_command(force=force, tag=tag)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
