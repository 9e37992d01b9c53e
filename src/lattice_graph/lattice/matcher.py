"""Line classification for the lattice text format.

Each line of a lattice file is one of:
    edge      ``<start> <end> <input> <output> [<weight>]``
    terminal  ``<state>`` on its own, declaring an end state
    blank     empty or whitespace only
    malformed anything else
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

EDGE_LINE_PATTERN = re.compile(
    r"\s*([0-9]+)\s+([0-9]+)\s+(\S+)\s+(\S+)(?:\s+(-?[0-9]*\.?[0-9]+))?\s*"
)
TERMINAL_LINE_PATTERN = re.compile(r"\s*([0-9]+)\s*")
BLANK_LINE_PATTERN = re.compile(r"\s*")


class LineKind(Enum):
    EDGE = "edge"
    TERMINAL = "terminal"
    BLANK = "blank"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class LineMatch:
    """Result of matching one line.

    Only EDGE matches fill the transition fields; ``weight_text`` is None
    when the line carries no weight. ``terminal_state`` is set for TERMINAL
    matches.
    """

    kind: LineKind
    line: str
    start_text: Optional[str] = None
    end_text: Optional[str] = None
    input_symbol: Optional[str] = None
    output_symbol: Optional[str] = None
    weight_text: Optional[str] = None
    terminal_state: Optional[str] = None

    @property
    def is_edge(self) -> bool:
        return self.kind is LineKind.EDGE


class LineMatcher:
    """Applies the edge pattern, then the terminal pattern, to whole lines."""

    def __init__(
        self,
        edge_pattern: re.Pattern = EDGE_LINE_PATTERN,
        terminal_pattern: re.Pattern = TERMINAL_LINE_PATTERN,
    ) -> None:
        self.edge_pattern = edge_pattern
        self.terminal_pattern = terminal_pattern

    def match(self, line: str) -> LineMatch:
        edge = self.edge_pattern.fullmatch(line)
        if edge is not None:
            start, end, input_symbol, output_symbol, weight = edge.groups()
            return LineMatch(
                kind=LineKind.EDGE,
                line=line,
                start_text=start,
                end_text=end,
                input_symbol=input_symbol,
                output_symbol=output_symbol,
                weight_text=weight,
            )

        terminal = self.terminal_pattern.fullmatch(line)
        if terminal is not None:
            return LineMatch(kind=LineKind.TERMINAL, line=line, terminal_state=terminal.group(1))

        if BLANK_LINE_PATTERN.fullmatch(line):
            return LineMatch(kind=LineKind.BLANK, line=line)

        return LineMatch(kind=LineKind.MALFORMED, line=line)
