"""
Logging setup for lattice-graph.

Records go to stderr through a rich handler so they never mix with the
summaries and JSON the CLI prints on stdout. The level follows the
``verbosity`` setting of ``LatticeConfig``.
"""

import logging
from typing import Literal, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "lattice_graph"

Verbosity = Literal["quiet", "normal", "verbose"]

VERBOSITY_LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal") -> logging.Logger:
    """
    Route lattice_graph records to a rich handler on stderr.

    Args:
        verbosity: quiet logs errors only, normal adds warnings (such as
            an aborted file read), verbose adds per-file debug records

    Returns:
        The lattice_graph root logger
    """
    level = VERBOSITY_LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the lattice_graph namespace (the root one if name is None)."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
