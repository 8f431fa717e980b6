"""CLI commands"""

from .init import init_command
from .markers import markers_command
from .render import render_command

__all__ = ["init_command", "markers_command", "render_command"]
