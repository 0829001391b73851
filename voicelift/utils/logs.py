"""Logging setup for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "voicelift"


def setup_logging(level: str = "WARNING", plain: bool = False) -> logging.Logger:
    """Route ``voicelift.*`` loggers to a Rich handler on stderr.

    Calling it again replaces the previous handler, so repeated CLI runs in
    one process do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_voicelift", False):
            logger.removeHandler(handler)

    console = Console(stderr=True, no_color=plain, highlight=not plain)
    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=level == "DEBUG",
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler._voicelift = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
