"""Lattice model, line matching, graph building and state classification."""

from .builder import LatticeGraphBuilder, lowercase_label
from .classifier import FINAL_LABEL, classify_state, classify_states, is_nonword_edge
from .matcher import LineKind, LineMatch, LineMatcher
from .models import Edge, LatticeGraph, StateType

__all__ = [
    "Edge",
    "LatticeGraph",
    "StateType",
    "LineKind",
    "LineMatch",
    "LineMatcher",
    "LatticeGraphBuilder",
    "lowercase_label",
    "FINAL_LABEL",
    "classify_state",
    "classify_states",
    "is_nonword_edge",
]
