"""Windows that receive frame and input events and drive a scene."""

from __future__ import annotations

import logging
from typing import Optional

from hexmapper import transforms
from hexmapper.camera import Camera
from hexmapper.matrix import rotation_y
from hexmapper.scene import Scene
from hexmapper.vector import Vec3

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

KEY_RELEASE = 0

ZOOM_SPEED = 10.0
WHEEL_SCALE = -0.005
NEAREST_ZOOM = -10.0
FARTHEST_ZOOM = -20.0
DEFAULT_ZOOM = -15.0
DRAG_THRESHOLD_SQUARED = 25.0
DRAG_SCALE = 0.01
ORBIT_RADIUS = 2.5
FAR_PLANE_MARGIN = 0.001


class Window:
    """Base for windows on the application's window stack.

    Pointer hooks do nothing by default; subclasses override the ones they
    react to. ``width`` and ``height`` give the viewport size in pixels, and
    ``keys_down`` holds the keys currently held.
    """

    scene: Optional[Scene] = None

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.keys_down: set[int] = set()

    def update(self, dt: float) -> None:
        """Advance the window by ``dt`` seconds."""

    def handle_key_press(self, key: int, action: int) -> None:
        """Track which keys are held: a release drops the key, anything else adds it."""
        if action == KEY_RELEASE:
            self.keys_down.discard(key)
        else:
            self.keys_down.add(key)

    def mouse_down(self, x: int, y: int) -> None:
        """React to a button press at screen position ``(x, y)``."""

    def mouse_move(self, x: int, y: int) -> None:
        """React to the pointer moving to screen position ``(x, y)``."""

    def mouse_up(self, was_focused: bool) -> None:
        """React to a button release."""

    def mouse_wheel(self, delta: int) -> None:
        """React to a wheel turn."""

    def clear_focus(self) -> None:
        """Drop any hover or focus state."""


class SceneWindow(Window):
    """A window showing a scene through a camera that can be dragged and zoomed."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        super().__init__(width, height)
        self.scene = Scene()
        self.camera = Camera()
        self.camera_time = 0.0
        self.camera_rotates = False
        self.desired_z = DEFAULT_ZOOM
        self.is_mouse_down = False
        self._press = (0, 0)
        self._drag = (0, 0)
        logger.debug("camera position: %s", self.camera.position)

    def update(self, dt: float) -> None:
        """Orbit the camera if asked, ease it towards the zoom level, update the scene."""
        if self.camera_rotates:
            self.camera_time += dt
            self.camera.position = transforms.transform_point(
                rotation_y(self.camera_time), Vec3(ORBIT_RADIUS, 0.0, 0.0)
            )

        position = self.camera.position
        if position.z != self.desired_z:
            step = ZOOM_SPEED * dt
            if position.z > self.desired_z:
                z = max(position.z - step, self.desired_z)
            else:
                z = min(position.z + step, self.desired_z)
            self.camera.position = Vec3(position.x, position.y, z)
            self.camera.far_plane = -z + FAR_PLANE_MARGIN

        self.scene.update(dt)

    def handle_key_press(self, key: int, action: int) -> None:
        """Keys do not move the camera; only the held-key state is kept."""
        super().handle_key_press(key, action)

    def set_camera_position(self, x: float, y: float, z: float) -> None:
        """Move the camera, looking straight at the map plane, with a matching far plane."""
        self.camera.position = Vec3(x, y, z)
        self.camera.target = Vec3(x, y, 0.0)
        self.camera.far_plane = -z + FAR_PLANE_MARGIN

    def set_camera_rotate(self, should_rotate: bool) -> None:
        """Turn the automatic camera orbit on or off."""
        self.camera_rotates = should_rotate

    def mouse_down(self, x: int, y: int) -> None:
        """Start a press that becomes either a click or a drag."""
        logger.debug("mouse down at (%d, %d)", x, y)
        self.is_mouse_down = True
        self._press = (x, y)
        self._drag = (x, y)

    def mouse_move(self, x: int, y: int) -> None:
        """Pan the camera while dragging, otherwise pass the hover to the scene."""
        if self.is_mouse_down:
            drag_x, drag_y = self._drag
            dx, dy = float(x - drag_x), float(y - drag_y)
            if dx * dx + dy * dy > DRAG_THRESHOLD_SQUARED:
                position = self.camera.position
                position = Vec3(position.x + dx * DRAG_SCALE, position.y + dy * DRAG_SCALE, position.z)
                self._drag = (x, y)
                self.camera.position = position
                self.camera.target = Vec3(position.x, position.y, 0.0)
                self.clear_focus()
        else:
            world = self.mouse_world_position(x, y)
            self.scene.mouse_moved(world.x, world.y)

    def mouse_up(self, was_focused: bool) -> None:
        """End a press; one that never turned into a drag is a click on the scene."""
        logger.debug("mouse up, was focused: %s", was_focused)
        if was_focused and self.is_mouse_down and self._drag == self._press:
            world = self.mouse_world_position(*self._press)
            self.scene.mouse_clicked(world.x, world.y)
        self.is_mouse_down = False
        self._press = (0, 0)
        self._drag = (0, 0)

    def mouse_wheel(self, delta: int) -> None:
        """Change the zoom level the camera eases towards, within fixed limits."""
        desired = self.desired_z + delta * WHEEL_SCALE
        self.desired_z = min(NEAREST_ZOOM, max(FARTHEST_ZOOM, desired))

    def clear_focus(self) -> None:
        """Clear focus throughout the scene."""
        self.scene.clear_focus()

    def mouse_world_position(self, x: int, y: int) -> Vec3:
        """World point on the far plane under screen position ``(x, y)``."""
        view = self.camera.view()
        projection = self.camera.perspective(self.width / self.height)
        inverse = transforms.invert(projection @ view)
        screen = Vec3(
            2.0 * (x / self.width) - 1.0,
            -2.0 * (y / self.height) + 1.0,
            1.0,
        )
        return transforms.transform_point(inverse, screen)