"""Tests for linalg.matrix module."""

import copy
from fractions import Fraction

import numpy as np
import pytest

from numkit.diagnostics import debug_context
from numkit.exceptions import NumkitError, ShapeMismatchError
from numkit.linalg.matrix import Matrix


@pytest.fixture
def a():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def b():
    return Matrix.from_rows([[7, 8], [9, 10], [11, 12]])


def test_construction_with_fill():
    """Dimensions and fill value are honoured."""
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.rows == 2 and m.columns == 3
    assert m.tolist() == [[0, 0, 0], [0, 0, 0]]

    filled = Matrix(2, 2, 1.5)
    assert filled.tolist() == [[1.5, 1.5], [1.5, 1.5]]


def test_rows_are_independent():
    """Writing one entry does not alias other rows."""
    m = Matrix(3, 3)
    m[0, 0] = 9
    assert m.tolist() == [[9, 0, 0], [0, 0, 0], [0, 0, 0]]


def test_empty_shapes_keep_column_count():
    m = Matrix(0, 3)
    assert m.shape == (0, 3)
    assert m.transpose().shape == (3, 0)
    assert str(m) == ""


def test_negative_dimensions_raise():
    with pytest.raises(ValueError, match="non-negative"):
        Matrix(-1, 2)


def test_from_rows_rejects_ragged_input():
    with pytest.raises(ShapeMismatchError, match="Row 1"):
        Matrix.from_rows([[1, 2], [3]])


def test_identity():
    assert Matrix.identity(3).tolist() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert Matrix.identity(0).shape == (0, 0)


def test_entry_access(a):
    assert a[1, 2] == 6
    a[1, 2] = 60
    assert a[1, 2] == 60
    assert a.row(1) == [4, 5, 60]


def test_entry_access_requires_pair(a):
    with pytest.raises(TypeError, match="pair"):
        a[0]


def test_bounds_checked_only_in_debug_mode(a):
    """Out-of-range indices raise IndexError when debug mode is on."""
    assert a[-1, -1] == 6
    with debug_context(True):
        with pytest.raises(IndexError, match="out of range"):
            a[2, 0]
        with pytest.raises(IndexError, match="out of range"):
            a[-1, 0] = 1
        assert a[1, 2] == 6


def test_copy_is_deep(a):
    for dup in (a.copy(), copy.copy(a), copy.deepcopy(a), Matrix.from_rows(a)):
        dup[0, 0] = 100
        assert a[0, 0] == 1


def test_row_and_tolist_return_copies(a):
    a.row(0)[0] = 100
    a.tolist()[0][0] = 100
    for row in a:
        row[0] = 100
    assert a[0, 0] == 1


def test_equality(a):
    assert a == Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert a != Matrix.from_rows([[1, 2, 3], [4, 5, 7]])
    assert a != a.transpose()
    assert Matrix(2, 3) != Matrix(3, 2)
    assert (a == "not a matrix") is False
    assert a == Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_nan_entries_never_compare_equal():
    m = Matrix.from_rows([[float("nan"), 1.0]])
    assert m != m.copy()
    assert not (m == m)
    assert Matrix.from_rows([[1.0, 1.0]]) == Matrix.from_rows([[1.0, 1.0]])


def test_matrices_are_unhashable(a):
    with pytest.raises(TypeError):
        hash(a)


def test_addition_and_subtraction(a):
    other = Matrix(2, 3, 1)
    assert (a + other).tolist() == [[2, 3, 4], [5, 6, 7]]
    assert (a - other).tolist() == [[0, 1, 2], [3, 4, 5]]
    assert (a - a) == Matrix(2, 3)
    assert a.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_negation(a):
    assert (-a).tolist() == [[-1, -2, -3], [-4, -5, -6]]
    assert -(-a) == a


def test_shape_mismatch_is_precondition_fault(a, b):
    """Dimension mismatches are assertion-style faults, not library errors."""
    with pytest.raises(ShapeMismatchError, match="Cannot add"):
        a + b
    with pytest.raises(ShapeMismatchError, match="Cannot subtract"):
        a - b
    with pytest.raises(ShapeMismatchError, match="Cannot multiply"):
        a * a
    with pytest.raises(AssertionError):
        a @ Matrix(2, 2)
    assert not issubclass(ShapeMismatchError, NumkitError)


def test_scalar_multiplication(a):
    assert (a * 2).tolist() == [[2, 4, 6], [8, 10, 12]]
    assert (2 * a) == (a * 2)
    assert (a * Fraction(1, 2))[0, 0] == Fraction(1, 2)
    assert (a * 0.5).tolist() == [[0.5, 1.0, 1.5], [2.0, 2.5, 3.0]]


def test_matrix_multiplication(a, b):
    product = a * b
    assert product.shape == (2, 2)
    assert product.tolist() == [[58, 64], [139, 154]]
    assert (a @ b) == product
    np.testing.assert_array_equal(product.to_numpy(), a.to_numpy() @ b.to_numpy())


def test_identity_is_neutral(rng):
    m = Matrix.from_numpy(rng.standard_normal((3, 4)))
    assert Matrix.identity(3) * m == m
    assert m * Matrix.identity(4) == m


def test_multiplication_with_complex_entries():
    m = Matrix.from_rows([[1j, 0], [0, 1]])
    assert (m * m).tolist() == [[-1, 0], [0, 1]]


def test_transpose(a):
    t = a.transpose()
    assert t.shape == (3, 2)
    assert t.tolist() == [[1, 4], [2, 5], [3, 6]]
    assert a.T == t
    assert t.transpose() == a

    t[0, 0] = 99
    assert a[0, 0] == 1


def test_transpose_involution_random(rng):
    m = Matrix.from_numpy(rng.standard_normal((4, 7)))
    assert m.transpose().transpose() == m


def test_string_rendering(a):
    """Rows are space-separated and newline-terminated."""
    assert str(a) == "1 2 3\n4 5 6\n"
    assert str(Matrix(1, 1, 2.5)) == "2.5\n"
    assert repr(a) == "Matrix([[1, 2, 3], [4, 5, 6]])"


def test_numpy_interop(a):
    arr = np.asarray(a)
    assert arr.shape == (2, 3)
    np.testing.assert_array_equal(arr, [[1, 2, 3], [4, 5, 6]])
    assert Matrix.from_numpy(arr) == a
    assert Matrix(0, 2).to_numpy().shape == (0, 2)

    with pytest.raises(ValueError, match="Expected 2D array"):
        Matrix.from_numpy(np.zeros(3))


def test_numpy_scalars_scale_matrices(a):
    scaled = a * np.float64(2.0)
    assert isinstance(scaled, Matrix)
    assert scaled.tolist() == [[2, 4, 6], [8, 10, 12]]


def test_non_numeric_factors_are_rejected(a):
    with pytest.raises(TypeError):
        a * "ab"
    with pytest.raises(TypeError):
        np.ones((2, 3)) * a
