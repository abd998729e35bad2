"""
Logging configuration for Context Frame.

Log records go to stderr through rich, so report output on stdout
(json, csv, sarif) stays machine-readable.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "context_frame"

# Chatty third-party loggers, held at WARNING unless --verbose
_NOISY_LOGGERS = ("watchfiles",)


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a log level; --quiet wins over --verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route logging through a rich handler on stderr.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Only log errors
        log_file: Optional file that also receives plain-text records

    Returns:
        The context_frame package logger
    """
    level = level_for(verbose, quiet)

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if verbose else max(level, logging.WARNING))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the context_frame namespace.

    Args:
        name: Module name such as ``__name__``; bare names are prefixed
              with ``context_frame.``. None returns the package logger.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
