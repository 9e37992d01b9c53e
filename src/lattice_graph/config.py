"""Configuration loading and management for lattice-graph.

Configuration sources are merged in priority order:
    1. Defaults (defined in LatticeConfig)
    2. Global config (~/.lattice-graph.toml)
    3. Project config (./lattice-graph.toml)
    4. Explicit config file
    5. Environment variables (LATTICE_GRAPH_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(lowercase_labels=False)
    >>> config.lowercase_labels
    False
    >>> config.final_label
    '</s>'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .lattice.classifier import FINAL_LABEL
from .logging_config import VERBOSITY_LEVELS, Verbosity

ENV_PREFIX = "LATTICE_GRAPH_"
CONFIG_FILENAME = "lattice-graph.toml"


@dataclass(frozen=True)
class LatticeConfig:
    """Settings for reading lattices and classifying their states.

    Attributes:
        Lattice format:
            final_label: Output symbol that marks a final state
            lowercase_labels: Case-fold output symbols while building the graph

        Reading:
            encoding: Text encoding of lattice and label files
            file_pattern: Shell-style file name pattern for directory reads
                (None reads every regular file)
            follow_symlinks: Descend into symlinked directories

        Non-word list:
            skip_blank_nonwords: Drop blank lines instead of collecting ""

        Output control:
            verbosity: Logging verbosity level
    """

    final_label: str = FINAL_LABEL
    lowercase_labels: bool = True

    encoding: str = "utf-8"
    file_pattern: Optional[str] = None
    follow_symlinks: bool = False

    skip_blank_nonwords: bool = False

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.final_label or any(ch.isspace() for ch in self.final_label):
            raise InvalidConfigError(
                "final_label", self.final_label, "must be a non-empty symbol without whitespace"
            )
        if self.lowercase_labels and self.final_label != self.final_label.lower():
            raise InvalidConfigError(
                "final_label",
                self.final_label,
                "must be lowercase when lowercase_labels is enabled",
            )
        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding")
        if self.file_pattern is not None and not self.file_pattern:
            raise InvalidConfigError("file_pattern", self.file_pattern, "must not be empty")
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> LatticeConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored

    Returns:
        Validated LatticeConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return LatticeConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LATTICE_GRAPH_* environment variables.

    Supported environment variables:
        LATTICE_GRAPH_FINAL_LABEL: str
        LATTICE_GRAPH_LOWERCASE_LABELS: bool (true/false/1/0)
        LATTICE_GRAPH_ENCODING: str
        LATTICE_GRAPH_FILE_PATTERN: str
        LATTICE_GRAPH_FOLLOW_SYMLINKS: bool
        LATTICE_GRAPH_SKIP_BLANK_NONWORDS: bool
        LATTICE_GRAPH_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(LatticeConfig)

    result: dict[str, Any] = {}

    for field_name in LatticeConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type."""
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    return value


def _load_toml_section(path: Path) -> dict:
    """Load a TOML config file.

    Settings may sit at the top level or under a ``[lattice-graph]`` table.
    """
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("lattice-graph", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [lattice-graph] must be a table")
    return dict(section)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
