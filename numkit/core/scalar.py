"""Element type accepted by the matrix engine.

Entries only need the four arithmetic operations, negation and a comparison
against zero, so ``int``, ``float``, ``complex`` and ``fractions.Fraction``
all work. Nothing is coerced unless an explicit ``dtype`` is requested.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """Structural type for matrix entries."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


# Conversion applied entry-wise before elimination, e.g. float or Fraction.
DType = Callable[[Any], Any]


def is_zero(value: Any) -> bool:
    """Exact zero test used for pivot selection (no tolerance)."""
    return value == 0


__all__ = ["Scalar", "DType", "is_zero"]
