"""Exception types raised by NumKit.

Two kinds of failure are kept apart:

- :class:`ShapeMismatchError` is a broken precondition (adding a 2x3 to a
  3x2, multiplying incompatible shapes). It derives from ``AssertionError``
  and not from :class:`NumkitError`, so ``except NumkitError`` never hides a
  caller bug.
- :class:`SingularMatrixError` is an expected outcome of inverting or solving
  with a degenerate matrix and is meant to be caught.
"""

from __future__ import annotations

from typing import Optional


class NumkitError(Exception):
    """Base class for recoverable NumKit errors."""


class SingularMatrixError(NumkitError, ArithmeticError):
    """Raised when a matrix without an inverse is inverted.

    Attributes:
        pivot: Column index at which no non-zero pivot could be found, when
            known.
    """

    default_message = "Attempted to take the inverse of degenerate matrix!"

    def __init__(self, message: Optional[str] = None, pivot: Optional[int] = None) -> None:
        super().__init__(message or self.default_message)
        self.pivot = pivot


class ShapeMismatchError(AssertionError):
    """Raised when operand dimensions violate an operation's precondition."""


def require_shape(condition: bool, message: str) -> None:
    """Raise :class:`ShapeMismatchError` with ``message`` unless ``condition`` holds.

    Unlike a bare ``assert`` this check is not stripped under ``python -O``.
    """
    if not condition:
        raise ShapeMismatchError(message)


__all__ = ["NumkitError", "SingularMatrixError", "ShapeMismatchError", "require_shape"]
