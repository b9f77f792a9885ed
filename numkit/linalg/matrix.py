"""Dense row-major matrix over any numeric element type.

Entries are stored as a list of row lists. Arithmetic operators always
return new matrices; the only in-place mutation is entry assignment
(``m[i, j] = value``). Elements can be ``int``, ``float``, ``complex``,
``fractions.Fraction`` or anything else satisfying
:class:`numkit.core.scalar.Scalar`.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from numkit.core.scalar import DType, Scalar
from numkit.diagnostics.debug_mode import is_debug_enabled
from numkit.exceptions import require_shape


class Matrix:
    """
    A ``rows x columns`` grid of numeric entries.

    Indices are zero-based and are only range-checked in debug mode (see
    :func:`numkit.diagnostics.set_debug_enabled`).

    Examples
    --------
    >>> a = Matrix.from_rows([[1, 2], [3, 4]])
    >>> (a * Matrix.identity(2)) == a
    True
    >>> print(a.transpose(), end="")
    1 3
    2 4
    """

    __slots__ = ("_data", "_columns")

    # Mutable container
    __hash__ = None  # type: ignore[assignment]
    # Make numpy defer to the reflected operators below.
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int, fill: Scalar = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{columns}")
        self._data: List[List[Any]] = [[fill] * columns for _ in range(rows)]
        self._columns = columns

    @classmethod
    def _wrap(cls, data: List[List[Any]], columns: int) -> "Matrix":
        # Takes ownership of ``data``.
        obj = cls.__new__(cls)
        obj._data = data
        obj._columns = columns
        return obj

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Matrix":
        """
        Build a matrix from a nested sequence.

        Raises:
            ShapeMismatchError: If the rows do not all have the same length.
        """
        data = [list(row) for row in rows]
        columns = len(data[0]) if data else 0
        for i, row in enumerate(data):
            require_shape(
                len(row) == columns,
                f"Row {i} has {len(row)} entries, expected {columns}",
            )
        return cls._wrap(data, columns)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Return the ``n x n`` identity matrix with integer entries."""
        ret = cls(n, n, 0)
        for i in range(n):
            ret._data[i][i] = 1
        return ret

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Matrix":
        """
        Build a matrix from a 2D array. Entries become Python scalars.

        Raises:
            ValueError: If the array is not 2D.
        """
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise ValueError(f"Expected 2D array, got {arr.ndim}D array")
        return cls._wrap(arr.tolist(), arr.shape[1])

    # ------------------------------------------------------------------
    # Shape and entry access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._data), self._columns

    def is_square(self) -> bool:
        return len(self._data) == self._columns

    def _check_index(self, key: Any) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, column) pair, got {key!r}")
        i, j = key
        if is_debug_enabled() and not (0 <= i < self.rows and 0 <= j < self._columns):
            raise IndexError(f"Index ({i}, {j}) out of range for {self.rows}x{self._columns} matrix")
        return i, j

    def __getitem__(self, key: Tuple[int, int]) -> Scalar:
        i, j = self._check_index(key)
        return self._data[i][j]

    def __setitem__(self, key: Tuple[int, int], value: Scalar) -> None:
        i, j = self._check_index(key)
        self._data[i][j] = value

    def row(self, i: int) -> List[Any]:
        """Return a copy of row ``i``."""
        return list(self._data[i])

    def tolist(self) -> List[List[Any]]:
        """Return the entries as a new nested list."""
        return [list(row) for row in self._data]

    def __iter__(self) -> Iterator[List[Any]]:
        for row in self._data:
            yield list(row)

    def __len__(self) -> int:
        return len(self._data)

    def copy(self) -> "Matrix":
        return Matrix._wrap(self.tolist(), self._columns)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.copy()

    # ------------------------------------------------------------------
    # Comparison and arithmetic
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        # Entry-wise so NaN never equals itself.
        return all(a == b for r1, r2 in zip(self._data, other._data) for a, b in zip(r1, r2))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _require_same_shape(self, other: "Matrix", op: str) -> None:
        require_shape(
            self.shape == other.shape,
            f"Cannot {op} matrices of shape {self.rows}x{self.columns} and {other.rows}x{other.columns}",
        )

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "add")
        data = [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        return Matrix._wrap(data, self._columns)

    def __neg__(self) -> "Matrix":
        return Matrix._wrap([[-a for a in row] for row in self._data], self._columns)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "subtract")
        return self + -other

    def scale(self, factor: Scalar) -> "Matrix":
        """Return the matrix with every entry multiplied by ``factor``."""
        return Matrix._wrap([[a * factor for a in row] for row in self._data], self._columns)

    def matmul(self, other: "Matrix") -> "Matrix":
        """
        Matrix product ``self * other``.

        The loops run row, shared dimension, output column so the inner loop
        walks contiguous rows of both the output and ``other``.

        Raises:
            ShapeMismatchError: If ``self.columns != other.rows``.
        """
        require_shape(
            self._columns == other.rows,
            f"Cannot multiply {self.rows}x{self.columns} by {other.rows}x{other.columns}",
        )
        out_cols = other.columns
        data = []
        for left_row in self._data:
            out_row = [0] * out_cols
            for k, a in enumerate(left_row):
                right_row = other._data[k]
                for j in range(out_cols):
                    out_row[j] = out_row[j] + a * right_row[j]
            data.append(out_row)
        return Matrix._wrap(data, out_cols)

    def __mul__(self, other: Any) -> "Matrix":
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, np.ndarray) or not isinstance(other, Scalar):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other: Any) -> "Matrix":
        if isinstance(other, np.ndarray) or not isinstance(other, Scalar):
            return NotImplemented
        return Matrix._wrap([[other * a for a in row] for row in self._data], self._columns)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def transpose(self) -> "Matrix":
        """Return a new ``columns x rows`` matrix with ``result[j, i] == self[i, j]``."""
        data = [[row[j] for row in self._data] for j in range(self._columns)]
        return Matrix._wrap(data, self.rows)

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def determinant(self, dtype: DType = float) -> Scalar:
        """Determinant via row-echelon elimination; see :func:`numkit.linalg.elimination.determinant`."""
        from .elimination import determinant

        return determinant(self, dtype=dtype)

    def inverse(self, dtype: DType = float) -> "Matrix":
        """Inverse via Gauss-Jordan elimination; see :func:`numkit.linalg.elimination.inverse`."""
        from .elimination import inverse

        return inverse(self, dtype=dtype)

    # ------------------------------------------------------------------
    # Display and interop
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return "".join(" ".join(str(a) for a in row) + "\n" for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"

    def to_numpy(self, dtype: Optional[Any] = None) -> np.ndarray:
        """Return the entries as a ``rows x columns`` array."""
        return np.array(self._data, dtype=dtype).reshape(self.rows, self._columns)

    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None) -> np.ndarray:
        return self.to_numpy(dtype=dtype)


__all__ = ["Matrix"]
