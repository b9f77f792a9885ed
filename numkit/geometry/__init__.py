"""3D vectors and Euler-angle rotations built on :class:`numkit.linalg.Matrix`."""

from .rotation import EulerAngle, rotation_x, rotation_y, rotation_z
from .vector import Vector3

__all__ = ["Vector3", "EulerAngle", "rotation_x", "rotation_y", "rotation_z"]
