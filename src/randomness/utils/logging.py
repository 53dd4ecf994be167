"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``randomness`` namespace.
    - Allow optional verbose/debug modes for the command line interface.

Notes/Edge cases:
    - Configuration is idempotent: calling :func:`setup_logging` twice replaces
      the handler installed by the first call instead of stacking handlers.
    - Seeds and dictionary contents are never logged.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "randomness"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

_HANDLER_ATTR = "_randomness_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package namespace.

    ``get_logger("dictionary")`` and ``get_logger("randomness.dictionary")``
    return the same logger.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: str = "WARNING",
    *,
    verbose: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level:
        Name of the log level (``DEBUG``, ``INFO``, ...).  Unknown names fall
        back to ``WARNING``.
    verbose:
        Use the detailed format including timestamps and logger names.
    stream:
        Destination stream; defaults to ``sys.stderr`` so that generated values
        written to stdout stay clean.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT if verbose else SIMPLE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "setup_logging"]
