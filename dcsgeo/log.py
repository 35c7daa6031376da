"""Terminal logging for dcsgeo.

Modules log through ``logging.getLogger(__name__)``; nothing is printed until
an application calls :func:`configure_logging`, which routes the ``dcsgeo``
logger to a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from dcsgeo import config

LOGGER_NAME = "dcsgeo"


def configure_logging(level: int | str | None = None, console: Console | None = None) -> logging.Logger:
    """Attach a :class:`rich.logging.RichHandler` to the package logger.

    Calling it again only updates the level; a second handler is never added.

    Args:
        level: Logging level name or number. Defaults to ``config.LOG_LEVEL``.
        console: Console to render into. Defaults to rich's stderr console.

    Returns:
        logging.Logger: The configured ``dcsgeo`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else config.LOG_LEVEL)
    return logger
