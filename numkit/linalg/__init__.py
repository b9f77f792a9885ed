"""Dense matrices, elimination and linear system solving.

All routines are pure Python and generic over the entry type; pass
``dtype=fractions.Fraction`` to ``determinant``/``inverse``/``solve`` for exact
rational arithmetic.
"""

from . import elimination, matrix
from .elimination import determinant, inverse
from .matrix import Matrix
from .solve import coefficient_matrix, solve

__all__ = [
    "elimination",
    "matrix",
    "Matrix",
    "determinant",
    "inverse",
    "solve",
    "coefficient_matrix",
]
