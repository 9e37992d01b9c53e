"""Loader for flat label-list files such as the non-word list.

One label per line. Unlike lattice files, blank lines are not skipped by
default: an empty line is collected as the label ``""``.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from ..exceptions import UNKNOWN_LINE, file_parse_error

T = TypeVar("T")


def identity(value: str) -> str:
    return value


class SetFileParser(Generic[T]):
    """Collects transformed lines into a ``frozenset``."""

    def __init__(
        self,
        transform: Optional[Callable[[str], T]] = None,
        skip_blank: bool = False,
    ) -> None:
        self.transform = transform or identity
        self.skip_blank = skip_blank
        self._values: set[T] = set()

    def handle_line(self, line: str, line_number: int = UNKNOWN_LINE) -> Optional[T]:
        if self.skip_blank and not line.strip():
            return None
        try:
            value = self.transform(line)
        except ValueError as e:
            raise file_parse_error(f"Invalid value: {line}", line_number, cause=e) from e
        self._values.add(value)
        return value

    def complete_parse(self) -> frozenset[T]:
        return frozenset(self._values)

    def get_completed_parse(self) -> frozenset[T]:
        values = self.complete_parse()
        self.reset()
        return values

    def reset(self) -> None:
        self._values = set()

    def __repr__(self) -> str:
        return f"SetFileParser(transform={self.transform!r}, skip_blank={self.skip_blank})"
