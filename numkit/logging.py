"""Logging utilities for NumKit.

All library loggers live under the ``numkit.`` namespace, write to stderr and
do not propagate to the root logger. The initial level comes from the
``NUMKIT_LOG_LEVEL`` environment variable (default: WARNING).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LOG_LEVEL_ENV_VAR = "NUMKIT_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its integer value."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


_default_level: int = _resolve_level(os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING"))


def _make_handler(level: int, stream: object, format_string: str) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Args:
        name: Logger name, usually ``__name__`` of the calling module. Names
            outside the ``numkit`` namespace are nested under it. ``None``
            returns the package logger.

    Returns:
        Configured logger instance. Repeated calls return the same object.

    Example:
        >>> from numkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Building twiddle table for n=%d", 8)
    """
    if name is None or name == "numkit":
        logger_name = "numkit"
    elif name.startswith("numkit."):
        logger_name = name
    else:
        logger_name = f"numkit.{name}"

    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_default_level)
        logger.addHandler(_make_handler(_default_level, sys.stderr, _DEFAULT_FORMAT))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every NumKit logger, including ones created later.

    Args:
        level: ``logging.DEBUG``, ``logging.INFO``, ... or the level name as a
            string (case-insensitive).
    """
    global _default_level
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _default_level = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of all NumKit loggers.

    Call once at application startup when the default stderr output is not
    wanted.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses
            ``[LEVEL] name: message``.
        stream: Output stream (default: sys.stderr).
    """
    global _default_level
    level = _resolve_level(level)
    stream = sys.stderr if stream is None else stream
    format_string = _DEFAULT_FORMAT if format_string is None else format_string

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(level, stream, format_string))

    _default_level = level
