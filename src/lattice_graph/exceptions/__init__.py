"""Exception hierarchy for lattice-graph."""

from .base import LatticeGraphError
from .config import ConfigurationError, InvalidConfigError
from .io import FileAccessError, InvalidPathError, LatticeIOError
from .parsing import (
    UNKNOWN_LINE,
    FileParseError,
    MalformedStateError,
    ParseError,
    file_parse_error,
)

__all__ = [
    "LatticeGraphError",
    "LatticeIOError",
    "FileAccessError",
    "InvalidPathError",
    "ParseError",
    "FileParseError",
    "MalformedStateError",
    "file_parse_error",
    "UNKNOWN_LINE",
    "ConfigurationError",
    "InvalidConfigError",
]
