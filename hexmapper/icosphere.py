"""Icosphere mesh generation by recursive subdivision of an icosahedron."""

from __future__ import annotations

import math

from hexmapper.mesh import Mesh
from hexmapper.vector import Vec3
from hexmapper.vertex import SimpleVertex, VertexFormat

_T = (1.0 + math.sqrt(5.0)) / 2.0

_BASE_POINTS = (
    Vec3(-1.0, _T, 0.0),
    Vec3(1.0, _T, 0.0),
    Vec3(-1.0, -_T, 0.0),
    Vec3(1.0, -_T, 0.0),
    Vec3(0.0, -1.0, _T),
    Vec3(0.0, 1.0, _T),
    Vec3(0.0, -1.0, -_T),
    Vec3(0.0, 1.0, -_T),
    Vec3(_T, 0.0, -1.0),
    Vec3(_T, 0.0, 1.0),
    Vec3(-_T, 0.0, -1.0),
    Vec3(-_T, 0.0, 1.0),
)

_BASE_FACES = (
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
)


def create_icosphere(recursion_level: int) -> Mesh:
    """Build a unit icosphere, splitting every triangle in four ``recursion_level`` times.

    Each vertex lies on the unit sphere and its normal equals its position.
    """
    if recursion_level < 0:
        raise ValueError("recursion level must not be negative")

    vertices: list[SimpleVertex] = []
    middle_cache: dict[tuple[int, int], int] = {}

    def add_vertex(position: Vec3) -> int:
        n = position.normalized()
        vertices.append(SimpleVertex(n.x, n.y, n.z, n.x, n.y, n.z))
        return len(vertices) - 1

    def middle_point(p1: int, p2: int) -> int:
        key = (min(p1, p2), max(p1, p2))
        cached = middle_cache.get(key)
        if cached is not None:
            return cached
        v1, v2 = vertices[p1], vertices[p2]
        index = add_vertex(
            Vec3((v1.x + v2.x) / 2.0, (v1.y + v2.y) / 2.0, (v1.z + v2.z) / 2.0)
        )
        middle_cache[key] = index
        return index

    for point in _BASE_POINTS:
        add_vertex(point)

    faces = list(_BASE_FACES)
    for _ in range(recursion_level):
        refined: list[tuple[int, int, int]] = []
        for i0, i1, i2 in faces:
            a = middle_point(i0, i1)
            b = middle_point(i1, i2)
            c = middle_point(i2, i0)
            refined.extend(((i0, a, c), (i1, b, a), (i2, c, b), (a, b, c)))
        faces = refined

    return Mesh(VertexFormat.SIMPLE, tuple(vertices), tuple(i for face in faces for i in face))