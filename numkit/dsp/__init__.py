"""Fast Fourier Transform over Python complex sequences.

- In-place iterative radix-2 transform with bit-reversal permutation
- Non-mutating ``fft``/``ifft`` wrappers
- Explicit, thread-safe root-of-unity cache
"""

from .fft import (
    Direction,
    TwiddleCache,
    as_direction,
    default_cache,
    fft,
    ifft,
    max_abs_diff,
    transform,
)
from .utils import bit_reverse_permute, check_complex_buffer, is_pow2, next_pow2

__all__ = [
    # Utils
    "next_pow2",
    "is_pow2",
    "check_complex_buffer",
    "bit_reverse_permute",
    # FFT
    "Direction",
    "TwiddleCache",
    "as_direction",
    "default_cache",
    "transform",
    "fft",
    "ifft",
    "max_abs_diff",
]
