"""Tests for the lattice-graph exception hierarchy."""

from pathlib import Path

import pytest

from lattice_graph.exceptions import (
    UNKNOWN_LINE,
    ConfigurationError,
    FileAccessError,
    FileParseError,
    InvalidConfigError,
    InvalidPathError,
    LatticeGraphError,
    LatticeIOError,
    MalformedStateError,
    ParseError,
    file_parse_error,
)


class TestBaseError:
    def test_message_only(self):
        assert str(LatticeGraphError("boom")) == "boom"

    def test_details_rendered(self):
        error = LatticeGraphError("boom", {"a": "1", "b": "2"})
        assert str(error) == "boom (a=1, b=2)"


class TestHierarchy:
    """I/O and format errors are distinct branches."""

    @pytest.mark.parametrize(
        "error, base",
        [
            (FileAccessError(Path("x"), "denied"), LatticeIOError),
            (InvalidPathError(Path("x"), "does not exist"), LatticeIOError),
            (FileParseError("bad"), ParseError),
            (MalformedStateError(3), FileParseError),
            (InvalidConfigError("k", "v", "why"), ConfigurationError),
        ],
    )
    def test_branches(self, error, base):
        assert isinstance(error, base)
        assert isinstance(error, LatticeGraphError)

    def test_io_is_not_parse(self):
        assert not isinstance(FileAccessError(Path("x"), "denied"), ParseError)
        assert not isinstance(FileParseError("bad"), LatticeIOError)


class TestFileParseError:
    def test_line_number_in_message(self):
        error = FileParseError("File format error: junk", 7)
        assert error.line_number == 7
        assert error.reason == "File format error: junk"
        assert str(error) == "File format error: junk (on line: 7)"

    def test_unknown_line(self):
        error = FileParseError("bad")
        assert error.line_number == UNKNOWN_LINE == -1
        assert str(error).endswith("(on line: -1)")

    def test_cause_kept(self):
        cause = ValueError("nope")
        assert FileParseError("bad", 2, cause).cause is cause

    def test_helper(self):
        cause = ValueError("nope")
        error = file_parse_error("Invalid number in line: x", 4, cause=cause)
        assert isinstance(error, FileParseError)
        assert error.line_number == 4
        assert error.cause is cause

    def test_add_context_keeps_first_value(self):
        error = FileParseError("bad", 1)
        assert error.add_context("filepath", "a.lat") is error
        error.add_context("filepath", "b.lat")
        assert error.details == {"filepath": "a.lat"}
        assert str(error) == "bad (on line: 1) (filepath=a.lat)"

    def test_details_appended(self):
        error = FileParseError("bad", 1)
        error.details["filepath"] = "a.lat"
        assert str(error) == "bad (on line: 1) (filepath=a.lat)"


class TestMalformedStateError:
    def test_state(self):
        error = MalformedStateError(12)
        assert error.state == 12
        assert error.line_number == -1
        assert "12" in str(error)


class TestIOErrors:
    def test_file_access_details(self):
        error = FileAccessError(Path("a.lat"), "Encoding error")
        assert error.details == {"filepath": "a.lat", "reason": "Encoding error"}
        assert error.filepath == Path("a.lat")

    def test_invalid_path_reason(self):
        assert InvalidPathError(Path("a"), "not a directory").reason == "not a directory"


def test_invalid_config_details():
    error = InvalidConfigError("encoding", "zzz", "unknown text encoding")
    assert error.key == "encoding"
    assert error.details["reason"] == "unknown text encoding"
    assert "encoding" in str(error)
