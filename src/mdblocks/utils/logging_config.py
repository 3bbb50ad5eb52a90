"""Console logging setup for mdblocks."""

from __future__ import annotations

import logging
import sys

from mdblocks.config import MDBLOCKS_LOG_LEVEL

_PACKAGE_LOGGER = "mdblocks"
_CONSOLE_FORMAT = "%(message)s"

_console_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: int | str = MDBLOCKS_LOG_LEVEL) -> logging.Logger:
    """Attach a plain-text console handler to the package logger.

    Calling this again replaces the previous handler instead of stacking
    another one.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    global _console_handler

    logger = logging.getLogger(_PACKAGE_LOGGER)
    if _console_handler is not None:
        logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(_console_handler)
    logger.setLevel(level)
    return logger
