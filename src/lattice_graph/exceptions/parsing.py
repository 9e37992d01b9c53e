"""Format exceptions: malformed lines and malformed lattice topology."""

from typing import Optional

from .base import LatticeGraphError

#: Line number used when no reader is active.
UNKNOWN_LINE = -1


class ParseError(LatticeGraphError):
    """Base class for content errors in lattice or label files."""

    pass


class FileParseError(ParseError):
    """Raised when a line of input cannot be parsed.

    The 1-based line number is appended to the message as ``(on line: N)``
    and kept on ``line_number``; it is -1 when the error was raised outside
    of a file read.
    """

    def __init__(
        self,
        message: str,
        line_number: int = UNKNOWN_LINE,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(f"{message} (on line: {line_number})")
        self.reason = message
        self.line_number = line_number
        self.cause = cause


class MalformedStateError(FileParseError):
    """Raised when a reachable, non-final state has no outgoing edges."""

    def __init__(self, state: int):
        super().__init__(f"State has incoming but no outgoing edges: {state}")
        self.state = state


def file_parse_error(
    message: str, line_number: int = UNKNOWN_LINE, cause: Optional[BaseException] = None
) -> FileParseError:
    """Build a ``FileParseError`` for the given line.

    Kept separate from the parsers so any line handler can report errors
    against the line number its reader hands it.
    """
    return FileParseError(message, line_number=line_number, cause=cause)
