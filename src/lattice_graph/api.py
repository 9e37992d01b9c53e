"""Convenience entry points for one-shot callers.

Example:
    >>> from lattice_graph import read_lattice, read_nonwords, summarize
    >>> graph = read_lattice("utt001.lat")
    >>> nonwords = read_nonwords("nonwords.txt")
    >>> summary = summarize(graph, nonwords)
    >>> summary.state_count, summary.edge_count
    (42, 97)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, Optional, Union

from .config import LatticeConfig
from .lattice import (
    FINAL_LABEL,
    LatticeGraph,
    LatticeGraphBuilder,
    StateType,
    classify_states,
    lowercase_label,
)
from .logging_config import get_logger
from .reading import FileLineReader, SetFileParser, glob_filter

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class LatticeSummary:
    """Counts describing one parsed lattice."""

    state_count: int
    edge_count: int
    max_out_degree: int
    state_types: dict[StateType, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "states": self.state_count,
            "edges": self.edge_count,
            "max_out_edges": self.max_out_degree,
            "state_types": {
                state_type.value: self.state_types.get(state_type, 0) for state_type in StateType
            },
        }


def create_lattice_reader(config: Optional[LatticeConfig] = None) -> FileLineReader[LatticeGraph]:
    """Reader wired to a fresh lattice builder configured from ``config``."""
    config = config or LatticeConfig()
    builder = LatticeGraphBuilder(
        label_transform=lowercase_label if config.lowercase_labels else None
    )
    return FileLineReader(
        builder, encoding=config.encoding, follow_symlinks=config.follow_symlinks
    )


def read_lattice(path: PathLike, config: Optional[LatticeConfig] = None) -> LatticeGraph:
    """Parse a single lattice file.

    Raises:
        LatticeIOError: If the file cannot be read
        FileParseError: If a line is malformed
    """
    reader = create_lattice_reader(config)
    reader.read_file(path)
    graph = reader.parser.get_completed_parse()
    logger.debug("Parsed %s: %r", path, graph)
    return graph


def read_lattices(
    path: PathLike, config: Optional[LatticeConfig] = None
) -> dict[str, LatticeGraph]:
    """Parse a lattice file or every matching lattice file under a directory.

    Returns:
        Map of canonical file path to its graph
    """
    config = config or LatticeConfig()
    reader = create_lattice_reader(config)
    file_filter = glob_filter(config.file_pattern) if config.file_pattern else None
    graphs = reader.read_path(path, file_filter)
    reader.parser.reset()
    return graphs


def read_nonwords(
    path: Optional[PathLike], config: Optional[LatticeConfig] = None
) -> Optional[frozenset[str]]:
    """Load the non-word label set, or None when no file is given."""
    if path is None:
        return None
    config = config or LatticeConfig()
    parser: SetFileParser[str] = SetFileParser(skip_blank=config.skip_blank_nonwords)
    reader = FileLineReader(parser, encoding=config.encoding)
    reader.read_file(path)
    nonwords = parser.get_completed_parse()
    logger.debug("Loaded %d non-word labels from %s", len(nonwords), path)
    return nonwords


def summarize(
    graph: LatticeGraph,
    nonwords: Optional[AbstractSet[str]] = None,
    final_label: str = FINAL_LABEL,
) -> LatticeSummary:
    """Count states, edges and state roles of ``graph``.

    Raises:
        MalformedStateError: If ``nonwords`` is given and a state cannot be
            classified
    """
    state_types: dict[StateType, int] = {state_type: 0 for state_type in StateType}
    for state_type in classify_states(graph, nonwords, final_label).values():
        state_types[state_type] += 1
    return LatticeSummary(
        state_count=graph.state_count,
        edge_count=graph.edge_count,
        max_out_degree=graph.max_out_degree,
        state_types=state_types,
    )
