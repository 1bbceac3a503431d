"""Logging for catalog-graph.

A single RichHandler on stderr serves the ``catalog_graph`` loggers and, since
``serve`` starts Uvicorn without its own logging config, the server's loggers
too. ``log_file`` adds a plain-text copy.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "catalog_graph"

# Keys match ServerConfig.verbosity.
LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """Install the stderr (and optional file) handlers on the root logger.

    Args:
        verbosity: ``quiet`` logs errors only; ``verbose`` adds DEBUG records,
            one per resolver call and store insert
        log_file: Path appended to in plain text

    Returns:
        The ``catalog_graph`` package logger

    Raises:
        ValueError: If *verbosity* is not one of :data:`LEVELS`
    """
    try:
        level = LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"unknown verbosity: {verbosity!r}") from None
    debug = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debug,
            markup=False,
            show_path=debug,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    # force: the CLI may configure logging more than once per process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return *name* as a child of the package logger.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; other names are prefixed with ``catalog_graph.``.
    """
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
