"""Helpers for the in-place FFT: sizing, validation and bit reversal."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def next_pow2(n: int) -> int:
    """Return the next power-of-two >= n.

    Args:
        n: Integer length.

    Returns:
        Smallest power-of-two >= n. Returns 1 if n <= 0.
    """
    if n <= 0:
        return 1
    if n & (n - 1) == 0:
        return n
    return 1 << (n - 1).bit_length()


def is_pow2(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def check_complex_buffer(buffer: Any) -> MutableSequence:
    """Validate an FFT buffer and coerce its entries to ``complex`` in place.

    Args:
        buffer: Mutable sequence of numbers (typically a ``list``).

    Returns:
        The same buffer object, with every entry a Python ``complex``.

    Raises:
        TypeError: If the buffer is not a mutable sequence or an entry is not
            numeric.
    """
    if not isinstance(buffer, MutableSequence):
        raise TypeError(
            f"transform expects a mutable sequence such as a list, got "
            f"{type(buffer).__name__}; use fft()/ifft() for read-only input"
        )
    coerced = []
    for i, value in enumerate(buffer):
        if isinstance(value, (str, bytes)):
            raise TypeError(f"buffer[{i}] is not a number: {value!r}")
        try:
            coerced.append(complex(value))
        except (TypeError, ValueError) as exc:
            raise TypeError(f"buffer[{i}] is not a number: {value!r}") from exc
    # Nothing is written until every entry has converted.
    buffer[:] = coerced
    return buffer


def bit_reverse_permute(buffer: MutableSequence) -> None:
    """Reorder ``buffer`` in place into bit-reversed index order.

    The length must be a power of two. A running reversed index ``j`` is
    incremented in reversed-bit arithmetic alongside ``i``, and each pair is
    swapped once (when ``i < j``).
    """
    n = len(buffer)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            buffer[i], buffer[j] = buffer[j], buffer[i]
