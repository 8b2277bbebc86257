"""Logging setup for pocketbase-typegen.

Modules obtain their logger with ``get_logger(__name__)``. Handlers are only
installed by ``setup_logging``, which the CLI calls once at startup.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "pocketbase_typegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int = logging.WARNING, console: Console | None = None) -> None:
    """Install a rich handler on the package logger.

    Calling this again only updates the level.

    Args:
        level: Logging level for the package logger.
        console: Console to log to (defaults to stderr).
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
