"""In-place iterative radix-2 FFT.

The transform works on a Python list of ``complex`` samples:

1. the list is zero-padded to the next power of two (its length changes),
2. the samples are put into bit-reversed order,
3. ``log2(n)`` butterfly passes combine pairs using a table of roots of unity,
4. the inverse transform divides every sample by ``n``.

Sign convention: ``Direction.FORWARD`` uses the angle step ``+2*pi/n``, so
``fft(x) == n * numpy.fft.ifft(x)``. ``ifft(fft(x))`` returns ``x`` (padded).

Roots of unity are kept in a :class:`TwiddleCache`. Callers may pass their own
cache; otherwise a shared, lock-protected default cache is used. Both are safe
to use from several threads with different transform sizes.
"""

from __future__ import annotations

import math
import threading
from collections import OrderedDict
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from numkit.logging import get_logger

from .utils import bit_reverse_permute, check_complex_buffer, next_pow2

logger = get_logger(__name__)


class Direction(IntEnum):
    """Transform direction. The value is the sign of the angle step."""

    FORWARD = 1
    INVERSE = -1


DirectionLike = Union[Direction, int, str]


def as_direction(direction: DirectionLike) -> Direction:
    """
    Normalize ``direction`` to a :class:`Direction`.

    Accepts a Direction, the integers 1/-1, or the strings "forward"/"inverse"
    (case-insensitive).

    Raises:
        ValueError: If the value names no direction.
    """
    if isinstance(direction, str):
        try:
            return Direction[direction.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown FFT direction {direction!r}; expected 'forward' or 'inverse'"
            ) from None
    try:
        return Direction(direction)
    except ValueError:
        raise ValueError(
            f"Unknown FFT direction {direction!r}; expected 1 (forward) or -1 (inverse)"
        ) from None


def _build_roots(n: int, direction: Direction) -> Tuple[complex, ...]:
    theta = int(direction) * 2.0 * math.pi / n
    return tuple(complex(math.cos(theta * i), math.sin(theta * i)) for i in range(n // 2))


class TwiddleCache:
    """
    Thread-safe cache of root-of-unity tables keyed by ``(length, direction)``.

    Each table holds ``length // 2`` entries ``exp(i * direction * 2*pi*k / length)``.
    Least-recently-used tables are evicted once ``maxsize`` tables are held.

    Attributes:
        hits: Number of lookups served from the cache.
        misses: Number of tables computed.
    """

    def __init__(self, maxsize: int = 16) -> None:
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._tables: "OrderedDict[Tuple[int, Direction], Tuple[complex, ...]]" = OrderedDict()
        self._lock = threading.Lock()

    def roots(self, n: int, direction: DirectionLike = Direction.FORWARD) -> Tuple[complex, ...]:
        """Return the root table for a transform of length ``n`` (a power of two)."""
        key = (n, as_direction(direction))
        with self._lock:
            table = self._tables.get(key)
            if table is not None:
                self._tables.move_to_end(key)
                self.hits += 1
                return table

        # Computed outside the lock; a concurrent duplicate build is harmless.
        table = _build_roots(n, key[1])
        logger.debug("Built twiddle table for n=%d direction=%s", n, key[1].name)

        with self._lock:
            self.misses += 1
            self._tables[key] = table
            self._tables.move_to_end(key)
            while len(self._tables) > self.maxsize:
                evicted, _ = self._tables.popitem(last=False)
                logger.debug("Evicted twiddle table for n=%d direction=%s", evicted[0], evicted[1].name)
        return table

    def clear(self) -> None:
        """Drop every cached table and reset the counters."""
        with self._lock:
            self._tables.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        n, direction = key
        try:
            key = (n, as_direction(direction))
        except ValueError:
            return False
        with self._lock:
            return key in self._tables

    def __repr__(self) -> str:
        return f"TwiddleCache(maxsize={self.maxsize}, size={len(self)}, hits={self.hits}, misses={self.misses})"


_default_cache = TwiddleCache()


def default_cache() -> TwiddleCache:
    """Return the cache used when ``transform`` is called without one."""
    return _default_cache


def transform(
    buffer: List[complex],
    direction: DirectionLike = Direction.FORWARD,
    cache: Optional[TwiddleCache] = None,
) -> None:
    """
    Compute the FFT of ``buffer`` in place.

    The buffer is first extended with ``0j`` to the next power of two, so its
    length may change. An empty buffer becomes ``[0j]``.

    Args:
        buffer: Mutable sequence of complex samples (ints and floats are
            converted in place).
        direction: ``Direction.FORWARD`` (default) or ``Direction.INVERSE``.
            The inverse divides the output by the padded length.
        cache: Root-of-unity cache. Defaults to :func:`default_cache`.

    Raises:
        TypeError: If ``buffer`` is not a mutable sequence of numbers.
        ValueError: If ``direction`` is not a valid direction.
    """
    direction = as_direction(direction)
    check_complex_buffer(buffer)
    if cache is None:
        cache = _default_cache

    n = next_pow2(len(buffer))
    if len(buffer) < n:
        buffer.extend([0j] * (n - len(buffer)))

    bit_reverse_permute(buffer)

    roots = cache.roots(n, direction)
    span = 2
    while span <= n:
        half = span // 2
        stride = n // span
        for start in range(0, n, span):
            for k in range(half):
                u = buffer[start + k]
                v = buffer[start + k + half] * roots[stride * k]
                buffer[start + k] = u + v
                buffer[start + k + half] = u - v
        span <<= 1

    if direction is Direction.INVERSE:
        for i in range(n):
            buffer[i] /= n


def fft(samples: Iterable[complex], cache: Optional[TwiddleCache] = None) -> List[complex]:
    """Return the forward transform of ``samples`` without modifying them."""
    out = list(samples)
    transform(out, Direction.FORWARD, cache=cache)
    return out


def ifft(samples: Iterable[complex], cache: Optional[TwiddleCache] = None) -> List[complex]:
    """Return the inverse transform of ``samples`` without modifying them."""
    out = list(samples)
    transform(out, Direction.INVERSE, cache=cache)
    return out


def max_abs_diff(a: Sequence[complex], b: Sequence[complex]) -> float:
    """Largest ``|a[i] - b[i]|``; sequences of different length compare as inf."""
    if len(a) != len(b):
        return math.inf
    return max((abs(x - y) for x, y in zip(a, b)), default=0.0)


__all__ = [
    "Direction",
    "TwiddleCache",
    "as_direction",
    "default_cache",
    "transform",
    "fft",
    "ifft",
    "max_abs_diff",
]
