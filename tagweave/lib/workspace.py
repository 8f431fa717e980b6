"""Workspace utilities for tagweave"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional

from pydantic import ValidationError

from .config import CONFIG_FILENAMES, EngineConfig, save_config
from .errors import AlreadyInitializedError, ConfigError


class Workspace(NamedTuple):
    """Represents a directory holding a tagweave.yaml"""

    root: Path
    config_file: Path


def find_workspace(start: Path | None = None) -> Workspace | None:
    """
    Find workspace by walking up from start directory looking for tagweave.yaml.

    Returns None if no workspace is found.
    """
    if start is None:
        start = Path.cwd()

    current = start.resolve()

    for directory in [current] + list(current.parents):
        for filename in CONFIG_FILENAMES:
            config_file = directory / filename
            if config_file.exists():
                return Workspace(root=directory, config_file=config_file)

    return None


def load_engine_config(
    config_path: Optional[Path] = None, start: Optional[Path] = None
) -> EngineConfig:
    """Load an explicit config file, or the nearest discovered one."""
    if config_path is not None:
        return EngineConfig.load(config_path)

    ws = find_workspace(start)
    if ws is None:
        return EngineConfig()
    return EngineConfig.load(ws.config_file)


def check_already_initialized(config_path: Path) -> None:
    """Raise AlreadyInitializedError if config exists at `config_path`."""
    if config_path.exists():
        raise AlreadyInitializedError()


def create_config_file(config_path: Path, tag: Optional[str] = None) -> Path:
    """Create tagweave.yaml at the explicit path and return it."""
    try:
        config = EngineConfig(tag=tag or "Component", encoding="utf-8")
    except ValidationError as e:
        raise ConfigError(str(config_path), str(e)) from e
    save_config(config, config_path)
    return config_path


def scaffold(root: Path, tag: Optional[str] = None, force: bool = False) -> Path:
    """Scaffold a tagweave project in `root`. Returns created config path."""
    config_path = root / CONFIG_FILENAMES[0]
    if not force:
        check_already_initialized(config_path)
    return create_config_file(config_path, tag=tag)
