"""
Lattice Graph - ASR lattice file parsing and state classification

Reads the line-oriented lattice (finite-state transducer) format written by
speech recognition decoders into a weighted directed multigraph, and tells
initial, final, goal and intermediate states apart using an optional list
of non-word labels.
"""

__version__ = "0.1.0"

from .api import LatticeSummary, read_lattice, read_lattices, read_nonwords, summarize
from .config import LatticeConfig, load_config
from .lattice import (
    FINAL_LABEL,
    Edge,
    LatticeGraph,
    LatticeGraphBuilder,
    StateType,
    classify_state,
    classify_states,
)
from .reading import FileLineReader, SetFileParser

__all__ = [
    "read_lattice",  # Main entry point
    "read_lattices",
    "read_nonwords",
    "summarize",
    "LatticeSummary",
    "LatticeConfig",
    "load_config",
    "Edge",
    "LatticeGraph",
    "LatticeGraphBuilder",
    "StateType",
    "FINAL_LABEL",
    "classify_state",
    "classify_states",
    "FileLineReader",
    "SetFileParser",
]
