"""
Logging configuration for filestats.

Log records go to stderr through a rich handler, so they never mix with
report output on stdout. The level follows the ``verbosity`` setting:

    quiet    ERROR only
    normal   warnings, e.g. files skipped because they could not be read
    verbose  everything, including one "Scanning <path>" line per file

Worker threads log concurrently; the optional log file records the thread
name so per-worker progress can be told apart.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "filestats"

LOG_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s %(threadName)s %(name)s %(levelname)s %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Install handlers for a run.

    Calling it again replaces the handlers from the previous call, so the
    CLI can be invoked repeatedly in one process.

    Args:
        verbosity: One of "quiet", "normal", "verbose"
        log_file: Optional file that also receives every record at the
            chosen level

    Returns:
        The filestats root logger

    Raises:
        ValueError: If verbosity is not a known level
    """
    try:
        level = LOG_LEVELS[verbosity]
    except KeyError:
        raise ValueError(
            f"Unknown verbosity {verbosity!r}. Choose from: {', '.join(LOG_LEVELS)}"
        )

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_path=verbosity == "verbose",
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def configure_from(settings, log_file: Optional[str] = None) -> logging.Logger:
    """Set up logging from a loaded ScanConfig."""
    return setup_logging(verbosity=settings.verbosity, log_file=log_file)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the filestats namespace.

    Args:
        name: Module name (e.g., 'filestats.core.worker'); names outside the
            namespace are prefixed. None returns the root filestats logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
