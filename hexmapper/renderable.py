"""Objects placed in a scene with a position, rotation and scale."""

from __future__ import annotations

import math

from hexmapper.icosphere import create_icosphere
from hexmapper.matrix import Mat4, rotation_x, rotation_y, rotation_z, scaling, translation
from hexmapper.mesh import Mesh
from hexmapper.vector import Vec3
from hexmapper.vertex import SimpleVertex, VertexFormat


class Renderable:
    """Base for scene objects.

    The input hooks do nothing by default; subclasses override the ones they
    react to. ``age`` counts the seconds passed to :meth:`update`.
    """

    def __init__(self) -> None:
        self.position = Vec3(0.0, 0.0, 0.0)
        self.rotation = Vec3(0.0, 0.0, 0.0)
        self.scale = 1.0
        self.age = 0.0

    def set_position(self, x: float, y: float, z: float) -> None:
        """Place the object in world space."""
        self.position = Vec3(x, y, z)

    def set_rotation(self, deg_x: float, deg_y: float, deg_z: float) -> None:
        """Set the rotation about each axis, given in degrees."""
        self.rotation = Vec3(math.radians(deg_x), math.radians(deg_y), math.radians(deg_z))

    def set_scale(self, scale: float) -> None:
        """Set a uniform scale factor."""
        self.scale = scale

    def world_transform(self) -> Mat4:
        """Model matrix: scale, then rotate (Z, Y, X), then translate."""
        scale = scaling(Vec3(self.scale, self.scale, self.scale))
        rot = rotation_x(self.rotation.x) @ rotation_y(self.rotation.y) @ rotation_z(self.rotation.z)
        return translation(self.position) @ rot @ scale

    def update(self, dt: float) -> None:
        """Advance the object's clock by ``dt`` seconds."""
        self.age += dt

    def mouse_moved(self, x: float, y: float) -> None:
        """React to the pointer moving to world position ``(x, y)``."""

    def mouse_clicked(self, x: float, y: float) -> None:
        """React to a click at world position ``(x, y)``."""

    def clear_focus(self) -> None:
        """Drop any hover or focus state."""


def _face(normal: tuple[float, float, float], *corners: tuple[float, float, float]):
    return tuple(SimpleVertex(*corner, *normal) for corner in corners)


_CUBE_VERTICES = (
    _face((0.0, 0.0, -1.0), (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (1.0, -1.0, -1.0), (-1.0, -1.0, -1.0))
    + _face((0.0, 0.0, 1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0))
    + _face((0.0, -1.0, 0.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0))
    + _face((1.0, 0.0, 0.0), (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0), (1.0, -1.0, 1.0))
    + _face((0.0, 1.0, 0.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0))
    + _face((-1.0, 0.0, 0.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0))
)

_CUBE_INDICES = tuple(
    index
    for base in range(0, 24, 4)
    for index in (base, base + 1, base + 2, base + 3, base + 2, base)
)


def create_cube() -> Mesh:
    """A cube spanning -1..1 on each axis, with flat per-face normals."""
    return Mesh(VertexFormat.SIMPLE, _CUBE_VERTICES, _CUBE_INDICES)


class CubeRenderable(Renderable):
    """A white cube."""

    def __init__(self) -> None:
        super().__init__()
        self.mesh = create_cube()


class IcoSphereRenderable(Renderable):
    """A white unit sphere."""

    def __init__(self, recursion_level: int = 4) -> None:
        super().__init__()
        self.mesh = create_icosphere(recursion_level)