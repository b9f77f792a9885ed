"""Pytest configuration and shared fixtures for NumKit tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A fresh FFT twiddle cache per test
- Debug mode reset after every test
"""

import os

import numpy as np
import pytest
import torch

from numkit.diagnostics import set_debug_enabled
from numkit.dsp import TwiddleCache


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG seeded from TEST_RNG_SEED (default: 0)."""
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG seeded from TEST_RNG_SEED."""
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch RNGs for every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Make sure no test leaks debug mode into the next one."""
    yield
    set_debug_enabled(False)


@pytest.fixture(scope="function")
def cache() -> TwiddleCache:
    """A twiddle cache private to the test."""
    return TwiddleCache()


def random_complex(rng: np.random.Generator, n: int) -> list:
    """List of ``n`` complex samples with normal real and imaginary parts."""
    return [complex(a, b) for a, b in zip(rng.standard_normal(n), rng.standard_normal(n))]


@pytest.fixture(scope="function")
def complex_samples(rng: np.random.Generator):
    """Factory for random complex sample lists."""

    def make(n: int) -> list:
        return random_complex(rng, n)

    return make
