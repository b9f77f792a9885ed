"""NumKit - a small numerical kernel: in-place FFT and dense matrices."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Core abstractions
from .core import Device, DType, Scalar, default_device, device, is_zero

# Signal processing
from .dsp import (
    Direction,
    TwiddleCache,
    default_cache,
    fft,
    ifft,
    next_pow2,
    transform,
)

# Errors
from .exceptions import NumkitError, ShapeMismatchError, SingularMatrixError

# Geometry
from .geometry import EulerAngle, Vector3

# Linear algebra
from .linalg import Matrix, determinant, inverse, solve

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Core
    "Device",
    "device",
    "default_device",
    "Scalar",
    "DType",
    "is_zero",
    # DSP
    "Direction",
    "TwiddleCache",
    "default_cache",
    "transform",
    "fft",
    "ifft",
    "next_pow2",
    # Errors
    "NumkitError",
    "ShapeMismatchError",
    "SingularMatrixError",
    # Geometry
    "Vector3",
    "EulerAngle",
    # Linear algebra
    "Matrix",
    "determinant",
    "inverse",
    "solve",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
