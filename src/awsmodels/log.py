"""Logging helpers for the awsmodels namespace."""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "awsmodels"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_ATTR = "_awsmodels_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``awsmodels`` namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: str = "INFO",
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once only updates the level and format of the
    handler installed by the first call.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Format string for the handler
        stream: Target stream, stderr when omitted

    Returns:
        The package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = next((h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)), None)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))
    return logger
