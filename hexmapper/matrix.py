"""4x4 matrices stored in column-major order."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexmapper.vector import Vec3

Column = tuple[float, float, float, float]


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix.

    ``columns[c][r]`` is the element in column ``c`` and row ``r``, matching
    the memory layout expected by OpenGL. Multiplication with ``@`` composes
    transformations right to left.
    """

    columns: tuple[Column, Column, Column, Column]

    def __post_init__(self) -> None:
        columns = tuple(tuple(float(value) for value in column) for column in self.columns)
        if len(columns) != 4 or any(len(column) != 4 for column in columns):
            raise ValueError("a Mat4 needs exactly 4 columns of 4 values")
        object.__setattr__(self, "columns", columns)

    @classmethod
    def from_rows(cls, *args: float) -> Mat4:
        """Build a matrix from 16 values written row by row, as on paper."""
        if len(args) != 16:
            raise ValueError(f"expected 16 values, got {len(args)}")
        rows = list(zip(*[iter(args)] * 4))
        return cls(tuple(zip(*rows)))

    def __getitem__(self, index):
        """Return ``columns[index]``, or one element for a ``(column, row)`` pair."""
        if isinstance(index, tuple):
            column, row = index
            return self.columns[column][row]
        return self.columns[index]

    def rows(self) -> tuple[Column, Column, Column, Column]:
        """The matrix as four rows."""
        return tuple(zip(*self.columns))

    def transpose(self) -> Mat4:
        """The transposed matrix."""
        return Mat4(self.rows())

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        rows = self.rows()
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for row in rows)
                for column in other.columns
            )
        )


def identity() -> Mat4:
    """The identity matrix."""
    return Mat4.from_rows(
        1, 0, 0, 0,
        0, 1, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    )


def translation(offset: Vec3) -> Mat4:
    """A matrix translating by ``offset``."""
    return Mat4.from_rows(
        1, 0, 0, offset.x,
        0, 1, 0, offset.y,
        0, 0, 1, offset.z,
        0, 0, 0, 1,
    )


def scaling(scale: Vec3) -> Mat4:
    """A matrix scaling each axis by the matching component of ``scale``."""
    return Mat4.from_rows(
        scale.x, 0, 0, 0,
        0, scale.y, 0, 0,
        0, 0, scale.z, 0,
        0, 0, 0, 1,
    )


def rotation_x(angle: float) -> Mat4:
    """Rotation about the X axis by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    return Mat4.from_rows(
        1, 0, 0, 0,
        0, c, -s, 0,
        0, s, c, 0,
        0, 0, 0, 1,
    )


def rotation_y(angle: float) -> Mat4:
    """Rotation about the Y axis by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    return Mat4.from_rows(
        c, 0, s, 0,
        0, 1, 0, 0,
        -s, 0, c, 0,
        0, 0, 0, 1,
    )


def rotation_z(angle: float) -> Mat4:
    """Rotation about the Z axis by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    return Mat4.from_rows(
        c, -s, 0, 0,
        s, c, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    )