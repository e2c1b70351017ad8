"""Projection, camera and inversion helpers for 4x4 matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from hexmapper.matrix import Mat4, identity
from hexmapper.vector import Vec3


def rotation(angle: float, axis: Vec3) -> Mat4:
    """Rotation by ``angle`` radians around ``axis``; the axis need not be normalized."""
    x, y, z = axis.normalized()
    c, s = math.cos(angle), math.sin(angle)
    return Mat4.from_rows(
        c + x * x * (1 - c), x * y * (1 - c) - z * s, x * z * (1 - c) + y * s, 0,
        y * x * (1 - c) + z * s, c + y * y * (1 - c), y * z * (1 - c) - x * s, 0,
        z * x * (1 - c) - y * s, z * y * (1 - c) + x * s, c + z * z * (1 - c), 0,
        0, 0, 0, 1,
    )


def ortho(left: float, right: float, bottom: float, top: float, back: float, front: float) -> Mat4:
    """Orthographic projection mapping a right-handed box onto normalized device coordinates."""
    l, r, b, t, n, f = left, right, bottom, top, front, back
    tx = -(r + l) / (r - l)
    ty = -(t + b) / (t - b)
    tz = -(f + n) / (f - n)
    return Mat4.from_rows(
        2 / (r - l), 0, 0, tx,
        0, 2 / (t - b), 0, ty,
        0, 0, 2 / (f - n), tz,
        0, 0, 0, 1,
    )


def perspective(fov_degrees: float, aspect_ratio: float, near: float, far: float) -> Mat4:
    """Perspective projection for a camera at the origin looking down negative Z."""
    fovy = fov_degrees / 180 * math.pi
    f = 1.0 / math.tan(fovy / 2.0)
    return Mat4.from_rows(
        f / aspect_ratio, 0, 0, 0,
        0, f, 0, 0,
        0, 0, (far + near) / (near - far), (2 * far * near) / (near - far),
        0, 0, -1, 0,
    )


def look_at(eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
    """View matrix for a camera at ``eye`` looking towards ``target``."""
    z = (target - eye).normalized() * -1
    x = up.cross(z).normalized()
    y = z.cross(x)
    return Mat4.from_rows(
        x.x, x.y, x.z, -eye.dot(x),
        y.x, y.y, y.z, -eye.dot(y),
        z.x, z.y, z.z, -eye.dot(z),
        0, 0, 0, 1,
    )


def _det3(m: Sequence[Sequence[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def invert(matrix: Mat4) -> Mat4:
    """General inverse of a matrix; a singular matrix yields the identity."""
    rows = matrix.rows()
    cofactors = [
        [(-1) ** (r + c) * _det3(_minor(rows, r, c)) for c in range(4)]
        for r in range(4)
    ]
    det = sum(value * cof for value, cof in zip(rows[0], cofactors[0]))
    if det == 0:
        return identity()
    # The inverse is the transposed cofactor matrix over the determinant; read
    # column-major, the cofactor rows are exactly the inverse's columns.
    return Mat4(tuple(tuple(cof / det for cof in row) for row in cofactors))


def invert_affine(matrix: Mat4) -> Mat4:
    """Inverse of an affine transformation; a near-singular one yields the identity."""
    m00, m10, m20, m30 = matrix[0, 0], matrix[1, 0], matrix[2, 0], matrix[3, 0]
    m01, m11, m21, m31 = matrix[0, 1], matrix[1, 1], matrix[2, 1], matrix[3, 1]
    m02, m12, m22, m32 = matrix[0, 2], matrix[1, 2], matrix[2, 2], matrix[3, 2]

    c00, c10, c20 = m11 * m22 - m12 * m21, -(m01 * m22 - m02 * m21), m01 * m12 - m02 * m11
    c01, c11, c21 = -(m10 * m22 - m12 * m20), m00 * m22 - m02 * m20, -(m00 * m12 - m02 * m10)
    c02, c12, c22 = m10 * m21 - m11 * m20, -(m00 * m21 - m01 * m20), m00 * m11 - m01 * m10

    det = m00 * c00 + m10 * c10 + m20 * c20
    if abs(det) < 0.00001:
        return identity()

    i00, i10, i20 = c00 / det, c01 / det, c02 / det
    i01, i11, i21 = c10 / det, c11 / det, c12 / det
    i02, i12, i22 = c20 / det, c21 / det, c22 / det

    return Mat4.from_rows(
        i00, i10, i20, -(i00 * m30 + i10 * m31 + i20 * m32),
        i01, i11, i21, -(i01 * m30 + i11 * m31 + i21 * m32),
        i02, i12, i22, -(i02 * m30 + i12 * m31 + i22 * m32),
        0, 0, 0, 1,
    )


def _apply(matrix: Mat4, homogeneous: tuple[float, float, float, float]) -> Vec3:
    x, y, z, w = (sum(a * b for a, b in zip(row, homogeneous)) for row in matrix.rows())
    if w != 0 and w != 1:
        return Vec3(x / w, y / w, z / w)
    return Vec3(x, y, z)


def transform_point(matrix: Mat4, point: Vec3) -> Vec3:
    """Multiply a point (w = 1) by the matrix, with perspective divide when needed."""
    return _apply(matrix, (point.x, point.y, point.z, 1.0))


def transform_direction(matrix: Mat4, direction: Vec3) -> Vec3:
    """Multiply a direction (w = 0) by the matrix, with perspective divide when needed."""
    return _apply(matrix, (direction.x, direction.y, direction.z, 0.0))


def format_matrix(matrix: Mat4, width: int = 6, precision: int = 2) -> str:
    """Render the matrix as four text rows, as it would be written on paper."""
    return "".join(
        "| " + " ".join(f"{value:{width}.{precision}f}" for value in row) + " |\n"
        for row in matrix.rows()
    )