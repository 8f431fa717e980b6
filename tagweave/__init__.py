"""tagweave - recursive, file-based component templating.

Engine-only API; the CLI lives in tagweave.main.
"""

from tagweave._version import __version__
from tagweave.lib.config import EngineConfig
from tagweave.lib.document import Document, FileLoader, normalize_encoding
from tagweave.lib.errors import (
    CircularIncludeError,
    ConfigError,
    IncludeDepthError,
    IncludeError,
    TagweaveError,
)
from tagweave.lib.options import (
    ComponentMarker,
    ListValue,
    OptionSet,
    OptionValue,
    Scalar,
    find_markers,
    parse_options,
)
from tagweave.lib.resolver import Resolver, render
from tagweave.lib.substitute import expand_loop, substitute

__all__ = [
    "__version__",
    # Engine
    "Resolver",
    "render",
    "EngineConfig",
    # Documents
    "Document",
    "FileLoader",
    "normalize_encoding",
    # Options
    "ComponentMarker",
    "OptionSet",
    "OptionValue",
    "Scalar",
    "ListValue",
    "find_markers",
    "parse_options",
    # Substitution
    "substitute",
    "expand_loop",
    # Errors
    "TagweaveError",
    "ConfigError",
    "IncludeError",
    "IncludeDepthError",
    "CircularIncludeError",
]
