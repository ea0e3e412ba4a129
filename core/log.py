"""Logging setup for the workspace updater."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAMES = ("core", "apps")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Attach a rich handler to the package loggers.

    Args:
        verbose: Log at DEBUG instead of INFO
        console: Console to log to (defaults to a themed stderr console)
    """
    level = logging.DEBUG if verbose else logging.INFO

    if console is None:
        console = Console(
            stderr=True,
            theme=Theme({
                "logging.level.info": "cyan",
                "logging.level.warning": "yellow",
                "logging.level.error": "red",
                "logging.level.debug": "dim",
            }),
        )

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s"))

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
