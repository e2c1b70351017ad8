"""A simple perspective camera."""

from __future__ import annotations

from dataclasses import dataclass, field

from hexmapper import transforms
from hexmapper.matrix import Mat4
from hexmapper.vector import Vec3

_UP = Vec3(0.0, 1.0, 0.0)
_FIELD_OF_VIEW = 60.0
_NEAR_PLANE = 0.01


@dataclass
class Camera:
    """A camera at ``position`` looking at ``target`` with a 60 degree vertical field of view."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -5.0))
    target: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    far_plane: float = 5.001

    @property
    def eye(self) -> Vec3:
        """The point the camera sees from."""
        return self.position

    def view(self) -> Mat4:
        """The view matrix, with world up along +Y."""
        return transforms.look_at(self.position, self.target, _UP)

    def perspective(self, aspect_ratio: float) -> Mat4:
        """The projection matrix for a viewport of the given width over height."""
        return transforms.perspective(_FIELD_OF_VIEW, aspect_ratio, _NEAR_PLANE, self.far_plane)