"""Core types shared across NumKit: element protocol and tensor devices."""

from .device import Device, default_device, device
from .scalar import DType, Scalar, is_zero

__all__ = ["Device", "device", "default_device", "Scalar", "DType", "is_zero"]
