"""PyTorch interop for FFT buffers and matrices."""

from .utils import (
    buffer_to_tensor,
    infer_device,
    matrix_to_tensor,
    tensor_to_buffer,
    tensor_to_matrix,
)

__all__ = [
    "infer_device",
    "buffer_to_tensor",
    "tensor_to_buffer",
    "matrix_to_tensor",
    "tensor_to_matrix",
]
