"""
Example: FFT and dense linear algebra with NumKit

Shows the in-place transform on a two-tone signal, then inverts a matrix,
handles a singular system and solves a small system exactly.
"""

import math
from fractions import Fraction

from numkit import (
    Direction,
    EulerAngle,
    Matrix,
    SingularMatrixError,
    TwiddleCache,
    Vector3,
    solve,
    transform,
)
from numkit.dsp import max_abs_diff


def example_spectrum():
    """Example: Find the tones in a sampled signal."""
    print("=" * 60)
    print("Example 1: FFT - Two-tone signal")
    print("=" * 60)

    n = 16
    signal = [math.cos(2 * math.pi * 2 * t / 16) + 0.5 * math.sin(2 * math.pi * 5 * t / 16) for t in range(n)]
    original = list(signal)
    cache = TwiddleCache()

    transform(signal, Direction.FORWARD, cache=cache)
    print(f"Length: {len(signal)}")
    peaks = sorted(range(len(signal) // 2), key=lambda k: -abs(signal[k]))[:2]
    print(f"Strongest bins: {sorted(peaks)}")

    transform(signal, Direction.INVERSE, cache=cache)
    error = max_abs_diff(signal[:n], original)
    print(f"Round-trip error: {error:.2e}")
    print(f"Cache: {cache}")
    print()


def example_inverse():
    """Example: Inverse and determinant of a 3x3 matrix."""
    print("=" * 60)
    print("Example 2: Gauss-Jordan inverse")
    print("=" * 60)

    m = Matrix.from_rows([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
    print(f"det(M) = {m.determinant()}")
    print("M^-1 (exact) =")
    print(m.inverse(dtype=Fraction), end="")
    print(f"M * M^-1 == I: {m * m.inverse(dtype=Fraction) == Matrix.identity(3)}")

    singular = Matrix.from_rows([[1, 2], [2, 4]])
    try:
        singular.inverse()
    except SingularMatrixError as exc:
        print(f"Singular matrix: {exc} (det = {singular.determinant()})")
    print()


def example_solve():
    """Example: Solve a small linear system."""
    print("=" * 60)
    print("Example 3: Linear system")
    print("=" * 60)

    a = [[2, 1], [1, 3]]
    y = [3, 5]
    print(f"x (float) = {solve(a, y)}")
    print(f"x (exact) = {[str(v) for v in solve(a, y, dtype=Fraction)]}")
    print()


def example_rotation():
    """Example: Rotate a vector with Euler angles."""
    print("=" * 60)
    print("Example 4: Euler rotation")
    print("=" * 60)

    rot = EulerAngle(0.0, 0.0, math.pi / 2)
    v = rot.rotate(Vector3(1.0, 0.0, 0.0))
    print(f"Rotated x-axis: ({v.x:.3f}, {v.y:.3f}, {v.z:.3f})")
    print()


if __name__ == "__main__":
    example_spectrum()
    example_inverse()
    example_solve()
    example_rotation()
    print("All examples completed.")
