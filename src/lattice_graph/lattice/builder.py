"""Lattice graph construction from lattice file lines."""

from __future__ import annotations

from typing import Callable, Optional

from ..exceptions import UNKNOWN_LINE, file_parse_error
from .matcher import LineKind, LineMatch, LineMatcher
from .models import Edge, LatticeGraph

LabelTransform = Callable[[str], str]


def lowercase_label(label: str) -> str:
    """Label transform that case-folds output symbols."""
    return label.lower()


class LatticeGraphBuilder:
    """Accumulates lattice lines into a ``LatticeGraph``.

    One builder handles one file at a time; call ``reset()`` between files
    (the file reader does so for directory reads).
    """

    def __init__(
        self,
        label_transform: Optional[LabelTransform] = None,
        matcher: Optional[LineMatcher] = None,
    ) -> None:
        self.label_transform = label_transform
        self.matcher = matcher or LineMatcher()
        self.graph = LatticeGraph()

    def handle_line(self, line: str, line_number: int = UNKNOWN_LINE) -> Optional[Edge]:
        """Parse one line, adding its edge to the graph.

        Returns the new edge, or None for terminal and blank lines.

        Raises:
            FileParseError: If the line is malformed, a numeric field does
                not parse or the label transform rejects the output symbol.
        """
        match = self.matcher.match(line)
        if match.kind is LineKind.EDGE:
            edge = self._build_edge(match, line_number)
            self.graph.add_edge(edge)
            return edge
        if match.kind is LineKind.MALFORMED:
            raise file_parse_error(f"File format error: {line}", line_number)
        return None

    def complete_parse(self) -> LatticeGraph:
        """Return the graph built so far without resetting."""
        return self.graph

    def get_completed_parse(self) -> LatticeGraph:
        """Return the graph built so far and start a fresh one."""
        graph = self.complete_parse()
        self.reset()
        return graph

    def reset(self) -> None:
        self.graph = LatticeGraph()

    def _build_edge(self, match: LineMatch, line_number: int) -> Edge:
        try:
            start_state = int(match.start_text)
            end_state = int(match.end_text)
            weight = float(match.weight_text) if match.weight_text is not None else 0.0
        except (TypeError, ValueError) as e:
            raise file_parse_error(
                f"Invalid number in line: {match.line}", line_number, cause=e
            ) from e

        output_symbol = match.output_symbol
        if self.label_transform is not None:
            try:
                output_symbol = self.label_transform(output_symbol)
            except ValueError as e:
                raise file_parse_error(
                    f"Invalid label in line: {match.line}", line_number, cause=e
                ) from e

        return Edge(start_state, end_state, output_symbol, weight)

    def __repr__(self) -> str:
        return (
            f"LatticeGraphBuilder(label_transform={self.label_transform!r}, "
            f"graph={self.graph!r})"
        )
