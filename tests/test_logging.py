"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from numkit.dsp import TwiddleCache, transform
from numkit.exceptions import SingularMatrixError
from numkit.linalg import Matrix
from numkit.logging import configure_logging, get_logger, set_log_level


@pytest.fixture
def captured():
    """Route every NumKit logger to a buffer at DEBUG, then restore defaults."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    yield stream
    configure_logging(level=logging.WARNING)


def test_get_logger_namespaces_names():
    assert get_logger("test_module").name == "numkit.test_module"
    assert get_logger("numkit.dsp.fft").name == "numkit.dsp.fft"
    assert get_logger().name == "numkit"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")
    assert get_logger("module1") is not get_logger("module2")


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_accepts_names():
    logger = get_logger("test_module")
    try:
        set_log_level("debug")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

        set_log_level(logging.ERROR)
        assert logger.level == logging.ERROR
        assert get_logger("created_after_set").level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_custom_format(captured):
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=stream)
    logger.info("hello")
    assert stream.getvalue() == "INFO|hello\n"


def test_fft_logs_twiddle_table_builds(captured):
    transform([1.0] * 8, cache=TwiddleCache())
    assert "Built twiddle table for n=8 direction=FORWARD" in captured.getvalue()


def test_inverse_logs_singular_outcome(captured):
    with pytest.raises(SingularMatrixError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()
    output = captured.getvalue()
    assert "[INFO] numkit.linalg.elimination" in output
    assert "singular at column 1" in output


def test_inverse_logs_row_swaps(captured):
    Matrix.from_rows([[0, 1], [1, 0]]).inverse()
    assert "Swapping rows 0 and 1" in captured.getvalue()
