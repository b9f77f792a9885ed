"""Debug mode management for NumKit.

Debug mode switches on checks that are skipped on the fast path, such as
bounds checking on matrix entry access.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "NUMKIT_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently enabled.

    The initial value is read from the NUMKIT_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Example
    -------
    >>> from numkit.linalg import Matrix
    >>> with debug_context(True):
    ...     Matrix(2, 2)[1, 1]
    0
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
