"""Data models for parsed lattices.

A lattice is a weighted directed multigraph: states are non-negative
integers and every transition carries an output symbol and a weight
(typically a negative log probability).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


@dataclass(frozen=True)
class Edge:
    """One lattice transition.

    Equality and hashing use ``(start_state, end_state, output_symbol)`` only,
    so two transitions differing just in weight are the same logical edge.
    Ordering compares weights.
    """

    start_state: int
    end_state: int
    output_symbol: str
    weight: float = field(default=0.0, compare=False)

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight


class StateType(Enum):
    """Semantic role of a lattice state.

    Priority order (first match wins):
    1. INITIAL - no incoming edges
    2. FINAL - an incoming edge carries the final label
    3. GOAL - an outgoing edge carries a word (or no non-word set is known)
    4. INTERMEDIATE - every outgoing edge carries a non-word
    """

    INITIAL = "initial"
    FINAL = "final"
    GOAL = "goal"
    INTERMEDIATE = "intermediate"


class LatticeGraph:
    """Directed multigraph of integer states and ``Edge`` arcs.

    Self-loops and parallel edges are kept; nothing is deduplicated.
    Adding an edge adds both of its endpoints.
    """

    def __init__(self) -> None:
        self._in: dict[int, list[Edge]] = {}
        self._out: dict[int, list[Edge]] = {}
        self._edges: list[Edge] = []

    def add_state(self, state: int) -> bool:
        """Add a state; returns False if it was already present."""
        if state in self._out:
            return False
        self._in[state] = []
        self._out[state] = []
        return True

    def add_edge(self, edge: Edge) -> None:
        self.add_state(edge.start_state)
        self.add_state(edge.end_state)
        self._out[edge.start_state].append(edge)
        self._in[edge.end_state].append(edge)
        self._edges.append(edge)

    def in_edges(self, state: int) -> tuple[Edge, ...]:
        """Edges ending at ``state``; empty for unknown states."""
        return tuple(self._in.get(state, ()))

    def out_edges(self, state: int) -> tuple[Edge, ...]:
        """Edges starting at ``state``; empty for unknown states."""
        return tuple(self._out.get(state, ()))

    @property
    def states(self) -> list[int]:
        """All states in ascending order."""
        return sorted(self._out)

    @property
    def edges(self) -> list[Edge]:
        """All edges in insertion order."""
        return list(self._edges)

    @property
    def state_count(self) -> int:
        return len(self._out)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def max_out_degree(self) -> int:
        """Largest number of outgoing edges on any state (0 for an empty graph)."""
        return max((len(edges) for edges in self._out.values()), default=0)

    def __contains__(self, state: object) -> bool:
        return state in self._out

    def __iter__(self) -> Iterator[int]:
        return iter(self.states)

    def __len__(self) -> int:
        return self.state_count

    def __repr__(self) -> str:
        return f"LatticeGraph(states={self.state_count}, edges={self.edge_count})"
