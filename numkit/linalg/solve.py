"""Dense linear system solver built on the Gauss-Jordan inverse."""

from __future__ import annotations

from typing import Any, List, Sequence

from numkit.core.scalar import DType
from numkit.exceptions import require_shape
from numkit.logging import get_logger

from .elimination import inverse
from .matrix import Matrix

logger = get_logger(__name__)


def coefficient_matrix(a: Sequence[Sequence[Any]]) -> Matrix:
    """
    Build the ``n x n`` coefficient matrix for ``a`` (``n = len(a)``).

    Rows shorter than ``n`` are padded with zeros on the right.

    Raises:
        ShapeMismatchError: If any row has more than ``n`` entries.
    """
    n = len(a)
    m = Matrix(n, n)
    for i, row in enumerate(a):
        require_shape(len(row) <= n, f"Row {i} has {len(row)} entries, expected at most {n}")
        for j, value in enumerate(row):
            m[i, j] = value
    return m


def solve(a: Sequence[Sequence[Any]], y: Sequence[Any], dtype: DType = float) -> List[Any]:
    """
    Solve ``A x = Y`` for a square system.

    Computes ``x = A^-1 Y`` with a full inverse. Fine for the small dense
    systems this library targets; it does more work than an LU solve.

    Args:
        a: Coefficient rows, ``n`` rows of at most ``n`` entries each.
        y: Right-hand side of length ``n``.
        dtype: Element conversion used for the elimination and the result.

    Returns:
        The solution as a list of ``n`` values.

    Raises:
        ShapeMismatchError: If the shapes of ``a`` and ``y`` disagree.
        SingularMatrixError: If ``a`` is singular.

    Examples
    --------
    >>> from fractions import Fraction
    >>> solve([[2, 1], [1, 3]], [3, 5], dtype=Fraction)
    [Fraction(4, 5), Fraction(7, 5)]
    """
    require_shape(
        len(a) == len(y),
        f"Coefficient matrix has {len(a)} rows but right-hand side has {len(y)} entries",
    )
    logger.debug("Solving %dx%d linear system", len(a), len(a))
    m = coefficient_matrix(a)
    rhs = Matrix.from_rows([[dtype(v)] for v in y])
    x = inverse(m, dtype=dtype) * rhs
    return [row[0] for row in x]


__all__ = ["solve", "coefficient_matrix"]
