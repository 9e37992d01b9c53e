"""Streaming line reader for lattice and label files.

``FileLineReader`` drives any ``LineParser`` over a file, a directory tree
or either, handing each line to the parser together with its 1-based line
number.
"""

from __future__ import annotations

import fnmatch
from collections import deque
from pathlib import Path
from typing import Callable, Generic, Optional, Protocol, TypeVar, Union

from ..exceptions import UNKNOWN_LINE, FileAccessError, FileParseError, InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)

F = TypeVar("F")
F_co = TypeVar("F_co", covariant=True)

PathLike = Union[str, Path]
FileFilter = Callable[[Path], bool]


class LineParser(Protocol[F_co]):
    """Anything that consumes lines and produces one result per file."""

    def handle_line(self, line: str, line_number: int = UNKNOWN_LINE) -> object: ...

    def complete_parse(self) -> F_co: ...

    def reset(self) -> None: ...


def glob_filter(pattern: str) -> FileFilter:
    """File filter accepting file names matching a shell-style pattern."""

    def _matches(path: Path) -> bool:
        return fnmatch.fnmatch(path.name, pattern)

    return _matches


class FileLineReader(Generic[F]):
    """Reads files line by line into a ``LineParser``.

    The parser is not reset after ``read_file``; reuse across files is the
    caller's call. ``read_dir`` resets it before every file.
    """

    def __init__(
        self,
        parser: LineParser[F],
        encoding: str = "utf-8",
        follow_symlinks: bool = False,
    ) -> None:
        self.parser = parser
        self.encoding = encoding
        self.follow_symlinks = follow_symlinks
        self._line_number = UNKNOWN_LINE

    @property
    def line_number(self) -> int:
        """Number of the line being parsed, or -1 outside of a read."""
        return self._line_number

    def read_file(self, infile: PathLike) -> F:
        """Feed every line of ``infile`` to the parser and return its result.

        Raises:
            InvalidPathError: If the path is not a regular file
            FileAccessError: If the file cannot be opened, read or decoded
            FileParseError: If the parser rejects a line
        """
        path = Path(infile)
        if not path.exists():
            raise InvalidPathError(path, "does not exist")
        if not path.is_file():
            raise InvalidPathError(path, "not a regular file")

        logger.debug("Reading file: %s", path)
        try:
            with open(path, encoding=self.encoding) as handle:
                for self._line_number, raw_line in enumerate(handle, start=1):
                    self.parser.handle_line(raw_line.rstrip("\r\n"), self._line_number)
        except FileParseError as e:
            e.add_context("filepath", path)
            logger.warning("Aborted reading %s: %s", path, e.message)
            raise
        except UnicodeDecodeError as e:
            raise FileAccessError(path, f"Encoding error: {e}") from e
        except OSError as e:
            raise FileAccessError(path, f"OS error: {e}") from e
        finally:
            self._line_number = UNKNOWN_LINE

        return self.parser.complete_parse()

    def read_dir(self, indir: PathLike, file_filter: Optional[FileFilter] = None) -> dict[str, F]:
        """Read every matching regular file under ``indir``, recursively.

        Returns:
            Map of canonical file path to that file's parse, in traversal
            order (sorted names, files of a directory before its
            subdirectories, breadth first)

        Raises:
            InvalidPathError: If ``indir`` is not a directory
            FileAccessError, FileParseError: From the first failing file;
                nothing is returned for the other files
        """
        root = Path(indir)
        if not root.is_dir():
            raise InvalidPathError(root, "not a directory")

        files = self._collect_files(root, file_filter)
        logger.debug("Reading %d files from directory: %s", len(files), root)

        contents: dict[str, F] = {}
        for path in files:
            self.parser.reset()
            contents[str(path.resolve())] = self.read_file(path)
        return contents

    def read_path(
        self, inpath: PathLike, file_filter: Optional[FileFilter] = None
    ) -> dict[str, F]:
        """Read a directory with ``read_dir`` or a single file with ``read_file``."""
        path = Path(inpath)
        if path.is_dir():
            return self.read_dir(path, file_filter)
        if path.is_file():
            return {str(path.resolve()): self.read_file(path)}
        if not path.exists():
            raise InvalidPathError(path, "does not exist")
        raise InvalidPathError(path, "not a normal file")

    def _collect_files(self, root: Path, file_filter: Optional[FileFilter]) -> list[Path]:
        files: list[Path] = []
        dirs_to_expand: deque[Path] = deque([root])
        expanded: set[Path] = set()
        while dirs_to_expand:
            directory = dirs_to_expand.popleft()
            canonical = directory.resolve()
            if canonical in expanded:
                continue
            expanded.add(canonical)
            try:
                entries = sorted(directory.iterdir(), key=lambda p: p.name)
            except OSError as e:
                raise FileAccessError(directory, f"OS error: {e}") from e

            subdirs: list[Path] = []
            for entry in entries:
                if entry.is_symlink() and not self.follow_symlinks:
                    if entry.is_dir():
                        logger.debug("Skipping symlinked directory: %s", entry)
                        continue
                if entry.is_file():
                    if file_filter is None or file_filter(entry):
                        files.append(entry)
                    else:
                        logger.debug("Skipping filtered file: %s", entry)
                elif entry.is_dir():
                    subdirs.append(entry)
                else:
                    logger.debug("Skipping non-regular entry: %s", entry)
            dirs_to_expand.extend(subdirs)
        return files
