"""Elimination routines: determinant and Gauss-Jordan inverse.

Both work on a converted working copy of the input and never modify it.
Pivots are chosen naively: the first row at or below the diagonal whose
entry in the pivot column is not exactly zero. No tolerance is applied, so
an ill-conditioned float matrix may be inverted where an exact-arithmetic
one (``dtype=fractions.Fraction``) would be reported as singular.
"""

from __future__ import annotations

from typing import Any, List, Optional

from numkit.core.scalar import DType, Scalar, is_zero
from numkit.exceptions import SingularMatrixError, require_shape
from numkit.logging import get_logger

from .matrix import Matrix

logger = get_logger(__name__)


def _working_copy(m: Matrix, dtype: DType) -> List[List[Any]]:
    return [[dtype(a) for a in row] for row in m]


def _find_pivot(rows: List[List[Any]], column: int) -> Optional[int]:
    for r in range(column, len(rows)):
        if not is_zero(rows[r][column]):
            return r
    return None


def determinant(m: Matrix, dtype: DType = float) -> Scalar:
    """
    Determinant of a square matrix by reduction to upper-triangular form.

    Rows are swapped to bring a non-zero pivot onto the diagonal and every
    swap flips the sign. The result is the product of the diagonal.

    Args:
        m: Square matrix.
        dtype: Conversion applied to every entry before elimination.

    Returns:
        The determinant as ``dtype``. Exactly ``dtype(0)`` if the matrix is
        singular; ``dtype(1)`` for a 0x0 matrix.

    Raises:
        ShapeMismatchError: If ``m`` is not square.
    """
    require_shape(m.is_square(), f"Determinant requires a square matrix, got {m.rows}x{m.columns}")
    tmp = _working_copy(m, dtype)
    n = len(tmp)
    negate = False

    for i in range(n):
        p = _find_pivot(tmp, i)
        if p is None:
            return dtype(0)
        if p != i:
            tmp[i], tmp[p] = tmp[p], tmp[i]
            negate = not negate
        pivot_row = tmp[i]
        for r in range(i + 1, n):
            factor = tmp[r][i] / pivot_row[i]
            if is_zero(factor):
                continue
            row = tmp[r]
            for k in range(i, n):
                row[k] = row[k] - pivot_row[k] * factor

    result = dtype(1)
    for i in range(n):
        result = result * tmp[i][i]
    return -result if negate else result


def inverse(m: Matrix, dtype: DType = float) -> Matrix:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    The same row operations are applied to a working copy of ``m`` and to an
    identity matrix; once the working copy is reduced to the identity the
    second matrix holds the inverse.

    Args:
        m: Square matrix.
        dtype: Conversion applied to every entry, which also sets the element
            type of the result (e.g. ``float`` or ``fractions.Fraction``).

    Returns:
        A new matrix with ``m * result == identity`` (up to rounding).

    Raises:
        ShapeMismatchError: If ``m`` is not square.
        SingularMatrixError: If ``m`` has no inverse.
    """
    require_shape(m.is_square(), f"Inverse requires a square matrix, got {m.rows}x{m.columns}")
    tmp = _working_copy(m, dtype)
    n = len(tmp)
    zero, one = dtype(0), dtype(1)
    ret = [[one if i == j else zero for j in range(n)] for i in range(n)]

    for i in range(n):
        p = _find_pivot(tmp, i)
        if p is None:
            logger.info("Matrix of size %d is singular at column %d", n, i)
            raise SingularMatrixError(pivot=i)
        if p != i:
            logger.debug("Swapping rows %d and %d", i, p)
            tmp[i], tmp[p] = tmp[p], tmp[i]
            ret[i], ret[p] = ret[p], ret[i]

        pivot = tmp[i][i]
        tmp[i] = [a / pivot for a in tmp[i]]
        ret[i] = [a / pivot for a in ret[i]]

        for r in range(n):
            if r == i:
                continue
            factor = tmp[r][i]
            if is_zero(factor):
                continue
            tmp[r] = [a - b * factor for a, b in zip(tmp[r], tmp[i])]
            ret[r] = [a - b * factor for a, b in zip(ret[r], ret[i])]

    return Matrix.from_rows(ret)


__all__ = ["determinant", "inverse"]
