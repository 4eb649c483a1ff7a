"""Console logging for the command-line host."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


PROJECT_PREFIX = "microunit"


def config_console_handler(level: int = logging.WARNING, console: Console | None = None) -> RichHandler:
    """Build a RichHandler writing to stderr.

    At DEBUG the handler also shows the emitting module and source path.
    """
    debug_mode = level <= logging.DEBUG
    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
    )
    fmt = "%(name)s: %(message)s" if debug_mode else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Attach a console handler to the package logger; replaces earlier ones."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(PROJECT_PREFIX)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(config_console_handler(level, console))
    logger.setLevel(level)
    return logger
