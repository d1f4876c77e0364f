"""Logging setup for quasar-upgrade."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "quasarup"


def setup_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Route quasarup log records through rich.

    Args:
        verbose: Log DEBUG records (commands run, parse failures)
        console: Console to write to, stderr by default

    Returns:
        The package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
