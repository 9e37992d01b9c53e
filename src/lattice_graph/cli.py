"""Command-line interface for lattice-graph."""

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .api import LatticeSummary, read_lattice, read_lattices, read_nonwords, summarize
from .config import LatticeConfig, load_config
from .exceptions import ConfigurationError, LatticeGraphError, LatticeIOError, ParseError
from .lattice import StateType, classify_states
from .logging_config import setup_logging

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_IOERR = 74
EX_CONFIG = 78

STATE_STYLES = {
    StateType.INITIAL: "cyan",
    StateType.FINAL: "magenta",
    StateType.GOAL: "red",
    StateType.INTERMEDIATE: "green",
}

app = typer.Typer(
    name="lattice-graph",
    help="Lattice Graph - parse ASR lattice files and classify their states",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"lattice-graph {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Parse word/phone lattice files into graphs."""


def _exit_code(error: LatticeGraphError) -> int:
    if isinstance(error, LatticeIOError):
        return EX_IOERR
    if isinstance(error, ParseError):
        return EX_DATAERR
    if isinstance(error, ConfigurationError):
        return EX_CONFIG
    return 1


def _fail(what: str, error: LatticeGraphError) -> NoReturn:
    if isinstance(error, LatticeIOError):
        category = "I/O error"
    elif isinstance(error, ParseError):
        category = "Parse error"
    else:
        category = "Error"
    err_console.print(
        f"[red]{category} while reading {what}:[/red] {escape(str(error))}",
        highlight=False,
        soft_wrap=True,
    )
    raise typer.Exit(_exit_code(error))


def _load(config_file: Optional[Path], verbose: bool, quiet: bool) -> LatticeConfig:
    try:
        config = load_config(config_file=config_file, verbose=verbose, quiet=quiet)
    except ConfigurationError as e:
        _fail("configuration", e)
    setup_logging(config.verbosity)
    return config


def _load_nonwords(nonwords_file: Optional[Path], config: LatticeConfig) -> Optional[frozenset]:
    try:
        return read_nonwords(nonwords_file, config)
    except LatticeGraphError as e:
        _fail("non-word label file", e)


@app.command()
def info(
    path: Path = typer.Argument(..., help="Lattice file or directory of lattice files"),
    nonwords_file: Optional[Path] = typer.Option(
        None,
        "--nonwords",
        "-n",
        help="Text file of labels to treat as non-words",
        dir_okay=False,
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Print state and edge counts for each lattice file.

    [bold cyan]Examples:[/bold cyan]

      lattice-graph info utt001.lat

      lattice-graph info lattices/ --nonwords nonwords.txt --format json
    """
    if fmt not in ("rich", "json"):
        err_console.print(f"Unknown format: {fmt}", markup=False)
        raise typer.Exit(EX_USAGE)

    config = _load(config_file, verbose, quiet)

    try:
        graphs = read_lattices(path, config)
    except LatticeGraphError as e:
        _fail("lattice file", e)

    nonwords = _load_nonwords(nonwords_file, config)

    try:
        summaries = {
            filepath: summarize(graph, nonwords, config.final_label)
            for filepath, graph in graphs.items()
        }
    except LatticeGraphError as e:
        _fail("lattice file", e)

    if fmt == "json":
        output = {filepath: summary.to_dict() for filepath, summary in summaries.items()}
        typer.echo(json.dumps(output, indent=2))
    else:
        _output_rich(summaries, nonwords is not None)


@app.command()
def states(
    path: Path = typer.Argument(..., help="Lattice file"),
    nonwords_file: Optional[Path] = typer.Option(
        None,
        "--nonwords",
        "-n",
        help="Text file of labels to treat as non-words",
        dir_okay=False,
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """List every state of a lattice file with its role and edge counts."""
    config = _load(config_file, verbose, quiet)

    try:
        graph = read_lattice(path, config)
    except LatticeGraphError as e:
        _fail("lattice file", e)

    nonwords = _load_nonwords(nonwords_file, config)

    try:
        roles = classify_states(graph, nonwords, config.final_label)
    except LatticeGraphError as e:
        _fail("lattice file", e)

    table = Table(title=escape(str(path)))
    table.add_column("State", justify="right")
    table.add_column("Role")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    for state, role in roles.items():
        table.add_row(
            str(state),
            f"[{STATE_STYLES[role]}]{role.value}[/{STATE_STYLES[role]}]",
            str(len(graph.in_edges(state))),
            str(len(graph.out_edges(state))),
        )
    console.print(table)


def _output_rich(summaries: dict[str, LatticeSummary], classified: bool) -> None:
    for filepath, summary in summaries.items():
        console.print(f"[bold cyan]{escape(filepath)}[/bold cyan]", highlight=False)
        console.print(f"  Vertex count: {summary.state_count}")
        console.print(f"  Edge count: {summary.edge_count}")
        console.print(f"  Maximum number of outgoing edges: {summary.max_out_degree}")
        roles = ", ".join(
            f"[{STATE_STYLES[state_type]}]{state_type.value}[/{STATE_STYLES[state_type]}]="
            f"{count}"
            for state_type, count in summary.state_types.items()
        )
        console.print(f"  States: {roles}")
        if not classified:
            console.print(
                "  [dim](no non-word list given: goal and intermediate states"
                " are not told apart)[/dim]"
            )
