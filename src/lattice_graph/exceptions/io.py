"""I/O exceptions: missing paths, unreadable files."""

from pathlib import Path

from .base import LatticeGraphError


class LatticeIOError(LatticeGraphError):
    """Base class for errors reading lattice or label files from disk."""

    pass


class FileAccessError(LatticeIOError):
    """Raised when a file cannot be opened, read or decoded."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class InvalidPathError(LatticeIOError):
    """Raised when a path is neither a regular file nor a directory."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason
