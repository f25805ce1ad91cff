"""Logging setup shared by the console and the form."""
import logging
from typing import Union

from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL


def configure_logging(level: Union[str, int] = DEFAULT_LOG_LEVEL):
    """Send log records for the ``dicecollection`` package through rich."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("dicecollection")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    logger.propagate = False
    return logger
