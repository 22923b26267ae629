"""Logging setup.

Library modules only create loggers through :func:`get_logger` and emit
``DEBUG`` records. Applications that want to see them call
:func:`init_logging` once at startup::

    from blake256.logs import init_logging

    init_logging(level="DEBUG")

Env vars:
    BLAKE256_LOG_LEVEL = DEBUG|INFO|WARNING|ERROR (default WARNING)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "blake256"

_CONSOLE = Console(stderr=True, highlight=False, soft_wrap=True)
_HANDLER: Optional[logging.Handler] = None

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def init_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a Rich console handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    ``level`` falls back to ``BLAKE256_LOG_LEVEL``, then ``WARNING``.
    """
    global _HANDLER

    name = (level or os.getenv("BLAKE256_LOG_LEVEL") or "WARNING").upper()
    logger = logging.getLogger(LOGGER_NAME)
    numeric = logging.getLevelName(name)
    logger.setLevel(numeric if isinstance(numeric, int) else logging.WARNING)

    if _HANDLER is None:
        _HANDLER = RichHandler(console=_CONSOLE, show_time=True, show_path=False)
        _HANDLER.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(_HANDLER)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``blake256`` namespace."""

    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
