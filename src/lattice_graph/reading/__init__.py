"""File and directory reading for line-oriented formats."""

from .nonwords import SetFileParser
from .reader import FileFilter, FileLineReader, LineParser, glob_filter

__all__ = [
    "FileLineReader",
    "LineParser",
    "FileFilter",
    "glob_filter",
    "SetFileParser",
]
