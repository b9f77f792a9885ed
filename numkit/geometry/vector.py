"""Three-component vectors."""

from __future__ import annotations

import math
from typing import Any, Iterator

from numkit.core.scalar import Scalar
from numkit.linalg.matrix import Matrix


class Vector3:
    """
    A 3D vector with components ``x``, ``y`` and ``z``.

    ``v * w`` is the dot product, ``v * k`` scales by a number and ``v ^ w`` is
    the cross product. ``R * v`` applies a 3x3 matrix ``R`` to the vector.
    Passing two components leaves ``z`` at zero.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: Any, y: Any, z: Any = 0) -> None:
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_matrix(cls, m: Matrix) -> "Vector3":
        """Build a vector from a 3x1 column matrix."""
        if m.shape != (3, 1):
            raise ValueError(f"Expected a 3x1 column matrix, got {m.rows}x{m.columns}")
        return cls(m[0, 0], m[1, 0], m[2, 0])

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self + -other

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector3):
            return self.dot(other)
        if isinstance(other, Matrix) or not isinstance(other, Scalar):
            return NotImplemented
        return Vector3(other * self.x, other * self.y, other * self.z)

    def __rmul__(self, other: Any) -> "Vector3":
        # R * v applies a 3x3 matrix to the column vector.
        if isinstance(other, Matrix):
            return Vector3.from_matrix(other.matmul(self.to_matrix()))
        if not isinstance(other, Scalar):
            return NotImplemented
        return Vector3(other * self.x, other * self.y, other * self.z)

    def __xor__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.cross(other)

    def dot(self, other: "Vector3") -> Any:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> Any:
        """Squared length. Kept squared so integer vectors stay integral."""
        return self.dot(self)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.magnitude())

    def normalize(self) -> "Vector3":
        """
        Return the unit vector in the same direction.

        Raises:
            ZeroDivisionError: For the zero vector.
        """
        return self * (1.0 / self.norm())

    def to_matrix(self) -> Matrix:
        """Return the vector as a 3x1 column matrix."""
        return Matrix.from_rows([[self.x], [self.y], [self.z]])
