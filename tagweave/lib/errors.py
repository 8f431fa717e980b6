"""Shared error handling for tagweave."""

from __future__ import annotations

import sys
from typing import NoReturn

import typer


class TagweaveError(Exception):
    """Base exception for tagweave operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigError(TagweaveError):
    """Raised when tagweave.yaml cannot be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid config {path}: {reason}", exit_code=2)


class AlreadyInitializedError(TagweaveError):
    """Raised when trying to initialize an already initialized project."""

    def __init__(self) -> None:
        super().__init__("tagweave is already initialized in this directory")


class IncludeError(TagweaveError):
    """Base for include-graph safety valve errors."""


class IncludeDepthError(IncludeError):
    """Raised when includes nest deeper than the configured max_depth."""

    def __init__(self, path: str, max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Include depth limit ({max_depth}) exceeded at {path}")


class CircularIncludeError(IncludeError):
    """Raised when a document includes itself, directly or transitively."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        super().__init__("Circular include detected: " + " -> ".join(chain))


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on tagweave errors."""
    if isinstance(error, TagweaveError):
        exit_with_error(error.message, error.exit_code)
    elif isinstance(error, RecursionError):
        exit_with_error(
            "Include recursion too deep (does a document include itself?)"
        )
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
