"""State role classification decision tree.

Classifies lattice states from their incident edges alone. First matching
rule wins:

1. INITIAL - no incoming edges
2. FINAL - some incoming edge carries the final label
3. GOAL - no non-word set is available, so words cannot be told apart
4. (error) - no outgoing edges on a reachable, non-final state
5. GOAL - some outgoing edge carries a word
6. INTERMEDIATE - every outgoing edge carries a non-word

The non-word set is always an explicit argument. ``None`` means "unknown"
and is not the same as an empty set.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from ..exceptions import MalformedStateError
from ..logging_config import get_logger
from .models import Edge, LatticeGraph, StateType

logger = get_logger(__name__)

#: Conventional end-of-sentence output symbol.
FINAL_LABEL = "</s>"


def classify_state(
    state: int,
    graph: LatticeGraph,
    nonwords: Optional[AbstractSet[str]] = None,
    final_label: str = FINAL_LABEL,
) -> StateType:
    """Classify one state of ``graph``.

    Args:
        state: State id to classify
        graph: Completed lattice graph
        nonwords: Output symbols that are not words, or None if unknown
        final_label: Output symbol marking the end of a hypothesis

    Returns:
        StateType of the state

    Raises:
        MalformedStateError: If ``nonwords`` is given and the state has
            incoming edges, none of them final, and no outgoing edges.
    """
    in_edges = graph.in_edges(state)
    if not in_edges:
        return StateType.INITIAL

    if any(edge.output_symbol == final_label for edge in in_edges):
        return StateType.FINAL

    if nonwords is None:
        return StateType.GOAL

    out_edges = graph.out_edges(state)
    if not out_edges:
        raise MalformedStateError(state)

    if any(not is_nonword_edge(edge, nonwords) for edge in out_edges):
        return StateType.GOAL

    return StateType.INTERMEDIATE


def classify_states(
    graph: LatticeGraph,
    nonwords: Optional[AbstractSet[str]] = None,
    final_label: str = FINAL_LABEL,
) -> dict[int, StateType]:
    """Classify every state of ``graph``, in ascending state order."""
    logger.debug(
        "Classifying %d states (non-words %s)",
        graph.state_count,
        "absent" if nonwords is None else len(nonwords),
    )
    return {
        state: classify_state(state, graph, nonwords, final_label) for state in graph.states
    }


def is_nonword_edge(edge: Edge, nonwords: Optional[AbstractSet[str]]) -> bool:
    """True if the edge's output symbol is a known non-word."""
    if nonwords is None:
        return False
    return edge.output_symbol in nonwords
