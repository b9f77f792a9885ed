"""Conversions between NumKit containers and PyTorch tensors."""

from __future__ import annotations

from typing import List, Optional, Sequence

import torch

from numkit.core.device import Device, default_device
from numkit.linalg.matrix import Matrix


def infer_device(device: Optional[Device]) -> Device:
    """
    Return ``device`` if given, otherwise :func:`numkit.core.default_device`.
    """
    if device is not None:
        return device
    return default_device()


def buffer_to_tensor(buffer: Sequence[complex], device: Optional[Device] = None) -> torch.Tensor:
    """
    Convert a sample buffer into a 1D complex tensor.

    Parameters
    ----------
    buffer:
        Sequence of numbers, typically the list produced by
        :func:`numkit.dsp.transform`.
    device:
        Target device. Uses its ``complex_dtype`` (complex128 by default).

    Returns
    -------
    torch.Tensor
        Tensor with shape (len(buffer),).
    """
    target = infer_device(device)
    return torch.tensor(
        [complex(x) for x in buffer],
        dtype=target.complex_dtype,
        device=target.as_torch_device(),
    )


def tensor_to_buffer(t: torch.Tensor) -> List[complex]:
    """
    Convert a 1D tensor into a list of Python complex numbers for the FFT.

    Raises
    ------
    ValueError
        If the tensor is not 1D.
    """
    if t.dim() != 1:
        raise ValueError(f"Expected 1D tensor, got {t.dim()}D tensor")
    return [complex(x) for x in t.detach().cpu().tolist()]


def matrix_to_tensor(
    m: Matrix,
    device: Optional[Device] = None,
    dtype: Optional[torch.dtype] = None,
) -> torch.Tensor:
    """
    Convert a matrix into a 2D tensor.

    The dtype defaults to the device's complex dtype when any entry is
    complex and to its real dtype otherwise.
    """
    target = infer_device(device)
    data = [[complex(a) if isinstance(a, complex) else float(a) for a in row] for row in m]
    if dtype is None:
        has_complex = any(isinstance(a, complex) for row in data for a in row)
        dtype = target.complex_dtype if has_complex else target.dtype
    return torch.tensor(data, dtype=dtype, device=target.as_torch_device()).reshape(m.rows, m.columns)


def tensor_to_matrix(t: torch.Tensor) -> Matrix:
    """
    Convert a 2D tensor into a matrix of Python scalars.

    Raises
    ------
    ValueError
        If the tensor is not 2D.
    """
    if t.dim() != 2:
        raise ValueError(f"Expected 2D tensor, got {t.dim()}D tensor")
    rows, columns = t.shape
    m = Matrix(rows, columns)
    for i, row in enumerate(t.detach().cpu().tolist()):
        for j, value in enumerate(row):
            m[i, j] = value
    return m
