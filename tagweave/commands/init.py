"""Init command for tagweave."""

from pathlib import Path
from typing import Optional

import typer

from tagweave.lib.errors import handle_error
from tagweave.lib.workspace import scaffold


def init_command(force: bool = False, tag: Optional[str] = None) -> None:
    """Initialize tagweave in the current directory."""
    try:
        config_path = scaffold(Path.cwd(), tag=tag, force=force)
    except Exception as e:
        handle_error(e)

    typer.echo(f"Created {config_path.name}")
