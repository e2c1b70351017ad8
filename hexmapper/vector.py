"""Three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Scalar = Union[int, float]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector.

    Arithmetic operators work component-wise with another vector, or apply
    a scalar to every component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def _combine(self, other, op):
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other: Vec3 | Scalar) -> Vec3:
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other: Scalar) -> Vec3:
        return self.__add__(other)

    def __sub__(self, other: Vec3 | Scalar) -> Vec3:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Vec3 | Scalar) -> Vec3:
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: Scalar) -> Vec3:
        return self.__mul__(other)

    def __truediv__(self, other: Vec3 | Scalar) -> Vec3:
        return self._combine(other, lambda a, b: a / b)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vec3(self.x / length, self.y / length, self.z / length)
        return Vec3(0.0, 0.0, 0.0)

    def dot(self, other: Vec3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product with another vector."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def project(self, onto: Vec3) -> Vec3:
        """Projection of this vector onto another."""
        return onto * (self.dot(onto) / onto.dot(onto))

    def angle_between(self, other: Vec3) -> float:
        """Angle in radians between this vector and another."""
        cosine = self.dot(other) / (self.length() * other.length())
        return math.acos(max(-1.0, min(1.0, cosine)))