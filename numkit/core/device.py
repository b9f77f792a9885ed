"""Device settings used when moving buffers and matrices into PyTorch."""

from __future__ import annotations

import torch


class Device:
    """
    A torch device paired with the real and complex dtypes used for interop.

    Instances are treated as immutable once built.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        dtype: torch.dtype = torch.float64,
        complex_dtype: torch.dtype = torch.complex128,
    ) -> None:
        """
        Initialize a Device.

        Args:
            name: Logical device name ("cpu" or "cuda").
            torch_device: Underlying PyTorch device.
            dtype: Floating-point dtype for real matrices.
            complex_dtype: Complex dtype for FFT buffers and complex matrices.
        """
        self.name = name
        self.torch_device = torch_device
        self.dtype = dtype
        self.complex_dtype = complex_dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"dtype={self.dtype}, complex_dtype={self.complex_dtype})"
        )

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str) -> Device:
    """
    Create a Device from its name.

    Supported names are "cpu" and "cuda". Both default to float64/complex128
    so that conversions do not lose precision.

    Raises:
        RuntimeError: If "cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    if name == "cpu":
        return Device(name="cpu", torch_device=torch.device("cpu"))
    elif name == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device(name="cuda", torch_device=torch.device("cuda"))
    else:
        supported = ["cpu", "cuda"]
        raise ValueError(
            f"Unsupported device name: {name!r}. Supported devices: {supported}"
        )


def default_device() -> Device:
    """Return the default (CPU) device."""
    return device("cpu")
