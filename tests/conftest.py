"""Shared test fixtures for lattice-graph tests."""

import os
from pathlib import Path

import pytest

# 0 --A--> 1 --SIL--> 2 --EPS--> 3 --</s>--> 4
#          1 --WORD------------> 3
SIMPLE_LATTICE = """\
  0 1 a A 1.5
  1 2 sil SIL 0.25
  1 3 w WORD -2.0
  2 3 e EPS
  3 4 </s> </s> 0.0
  4
"""


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def simple_lattice_text():
    """Text of the small reference lattice."""
    return SIMPLE_LATTICE


@pytest.fixture
def simple_lattice_file(write_file):
    """A small lattice with one final state and one terminal line."""
    return write_file("simple.lat", SIMPLE_LATTICE)


@pytest.fixture
def nonwords_file(write_file):
    """Non-word list with silence and epsilon labels."""
    return write_file("nonwords.txt", "sil\neps\n")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and LATTICE_GRAPH_* vars out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("LATTICE_GRAPH_"):
            monkeypatch.delenv(key)
