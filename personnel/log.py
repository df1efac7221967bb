import sys
from typing import Optional, TextIO

from loguru import logger

from personnel.config import get_settings


def configure_logging(level: Optional[str] = None, sink: Optional[TextIO] = None) -> int:
    """
    Replace loguru's default handler with a single stderr sink.

    stdout is reserved for the program transcript, so logs never go there.
    Returns the handler id.
    """
    logger.remove()
    lvl = level or get_settings().effective_log_level
    handler_id = logger.add(
        sink or sys.stderr,
        level=lvl,
        format="{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    )
    logger.debug("Logging configured level={}", lvl)
    return handler_id
