"""Rotation matrices from Euler angles.

The composed rotation is ``Rz(theta_z) * Ry(theta_y) * Rx(theta_x)``: a
vector is rotated about x first, then y, then z. Angles are in radians and
every elementary matrix is right-handed.
"""

from __future__ import annotations

import math

from numkit.linalg.matrix import Matrix

from .vector import Vector3


def rotation_x(theta: float) -> Matrix:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix.from_rows([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rotation_y(theta: float) -> Matrix:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix.from_rows([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rotation_z(theta: float) -> Matrix:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix.from_rows([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


class EulerAngle:
    """A rotation given by angles about the x, y and z axes."""

    def __init__(self, theta_x: float, theta_y: float, theta_z: float) -> None:
        self.theta_x = theta_x
        self.theta_y = theta_y
        self.theta_z = theta_z
        self._m = rotation_z(theta_z) * rotation_y(theta_y) * rotation_x(theta_x)

    def __repr__(self) -> str:
        return f"EulerAngle({self.theta_x!r}, {self.theta_y!r}, {self.theta_z!r})"

    def to_matrix(self) -> Matrix:
        """Return a copy of the 3x3 rotation matrix."""
        return self._m.copy()

    def rotate(self, v: Vector3) -> Vector3:
        """Apply the rotation to ``v``."""
        return Vector3.from_matrix(self._m * v.to_matrix())

    def inverse(self) -> Matrix:
        """The inverse rotation. Rotations are orthogonal, so this is the transpose."""
        return self._m.transpose()
