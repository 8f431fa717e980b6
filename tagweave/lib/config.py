"""Configuration for the tagweave engine.

tagweave.yaml schema:
- tag: name of the self-closing component tag (default: Component)
- encoding: source encoding of documents (default: utf-8)
- max_depth: optional limit on include nesting
- detect_cycles: fail on a document that includes itself
- loop_separator: text placed between expanded foreach copies
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

CONFIG_FILENAMES = ("tagweave.yaml", "tagweave.yml")


class EngineConfig(BaseModel):
    """Settings that shape how documents are resolved."""

    model_config = {"extra": "forbid"}

    tag: str = Field(default="Component", description="Component tag name")
    encoding: str = Field(default="utf-8", description="Source document encoding")
    max_depth: int | None = Field(
        default=None, ge=0, description="Maximum include nesting (None = unlimited)"
    )
    detect_cycles: bool = Field(
        default=False, description="Raise on self-including documents"
    )
    loop_separator: str = Field(
        default="\n", description="Separator between foreach copies"
    )

    @field_validator("tag")
    @classmethod
    def tag_is_identifier(cls, value: str) -> str:
        value = value.strip()
        if not value or any(c.isspace() or c in "<>/" for c in value):
            raise ValueError(f"invalid tag name: {value!r}")
        return value

    @field_validator("encoding")
    @classmethod
    def encoding_is_known(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @classmethod
    def load(cls, path: Path | None) -> "EngineConfig":
        """Load config from yaml file, or defaults when there is none."""
        if path is None or not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(str(path), str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), "top-level value must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e

    def with_overrides(self, **overrides: Any) -> "EngineConfig":
        """Return a copy with non-None overrides applied (CLI flags)."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})


def save_config(config: EngineConfig, path: Path) -> None:
    """Save config to tagweave.yaml, writing only explicitly set fields."""
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(exclude_unset=True)

    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False, default_flow_style=False)
