"""Tests for debug mode functionality."""

import pytest

from numkit.diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from numkit.linalg import Matrix


def test_debug_mode_toggle_and_context() -> None:
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()
    assert not is_debug_enabled()

    set_debug_enabled(True)
    with debug_context(False):
        assert not is_debug_enabled()
    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    set_debug_enabled(False)
    with debug_context(True):
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


def test_debug_mode_enables_bounds_checks() -> None:
    m = Matrix(2, 2)
    set_debug_enabled(False)
    assert m[-1, -1] == 0

    set_debug_enabled(True)
    with pytest.raises(IndexError):
        m[-1, -1]
    with pytest.raises(IndexError):
        m[0, 2] = 5
