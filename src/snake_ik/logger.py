"""Loggers for the solver and its drivers.

All loggers live under the ``snake.`` namespace, write to stdout and share
one format, so solver debug lines and viewer messages interleave cleanly.
"""

import logging
import sys

_LOGGERS: dict[str, logging.Logger] = {}

_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the cached ``snake.<name>`` logger, creating it on first use."""
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(f"snake.{name}")
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    _LOGGERS[name] = logger
    return logger


def set_global_level(level: int | str) -> None:
    """Apply one level to every snake logger, e.g. ``logging.level`` from config.

    Args:
        level: A logging constant or its name ('DEBUG', 'info', ...).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    for logger in _LOGGERS.values():
        logger.setLevel(level)
