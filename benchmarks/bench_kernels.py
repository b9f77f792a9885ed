"""Benchmark the FFT and Gauss-Jordan inverse."""

import time
from typing import Dict

import numpy as np

from numkit.dsp import Direction, TwiddleCache, transform
from numkit.linalg import Matrix


def benchmark_fft(n: int, n_iter: int = 20) -> Dict[str, float]:
    """Benchmark a forward transform of length n.

    Args:
        n: Transform length (padded to a power of two).
        n_iter: Number of timed repetitions.

    Returns:
        Dictionary with timing results and the error against numpy.
    """
    rng = np.random.default_rng(0)
    samples = list(rng.standard_normal(n) + 1j * rng.standard_normal(n))
    cache = TwiddleCache()

    # Warmup (fills the twiddle cache)
    buf = list(samples)
    transform(buf, Direction.FORWARD, cache=cache)
    error = float(np.max(np.abs(np.array(buf) - np.fft.ifft(samples, n=len(buf)) * len(buf))))

    start = time.perf_counter()
    for _ in range(n_iter):
        buf = list(samples)
        transform(buf, Direction.FORWARD, cache=cache)
    total_time = time.perf_counter() - start

    return {
        "n": n,
        "time_per_eval_sec": total_time / n_iter,
        "max_error": error,
    }


def benchmark_inverse(n: int, n_iter: int = 5) -> Dict[str, float]:
    """Benchmark inverting a random well-conditioned n x n matrix."""
    rng = np.random.default_rng(0)
    m = Matrix.from_numpy(rng.standard_normal((n, n)) + n * np.eye(n))

    start = time.perf_counter()
    for _ in range(n_iter):
        inv = m.inverse()
    total_time = time.perf_counter() - start

    residual = float(np.max(np.abs((m * inv).to_numpy() - np.eye(n))))
    return {
        "n": n,
        "time_per_eval_sec": total_time / n_iter,
        "max_residual": residual,
    }


if __name__ == "__main__":
    print("Benchmarking FFT...")
    for n in [256, 1024, 4096]:
        r = benchmark_fft(n)
        print(f"  n={r['n']:5d}: {r['time_per_eval_sec'] * 1e3:8.3f} ms  error={r['max_error']:.2e}")

    print("Benchmarking matrix inverse...")
    for n in [10, 25, 50]:
        r = benchmark_inverse(n)
        print(f"  n={r['n']:3d}: {r['time_per_eval_sec'] * 1e3:8.3f} ms  residual={r['max_residual']:.2e}")
