"""The application: a stack of windows fed with frames and input."""

from __future__ import annotations

import logging
from typing import Optional

from hexmapper.window import DEFAULT_HEIGHT, DEFAULT_WIDTH, Window

logger = logging.getLogger(__name__)

FPS_REPORT_INTERVAL = 5.0


class Application:
    """Holds the window stack; frames and input go to the topmost window."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.width = 0
        self.height = 0
        self._windows: list[Window] = []
        self._frame_counter = 0
        self._time_since_report = 0.0
        self.fps: Optional[int] = None
        self.resize(width, height)

    @property
    def top_window(self) -> Optional[Window]:
        """The window receiving frames and input, if any."""
        return self._windows[-1] if self._windows else None

    def resize(self, width: int, height: int) -> None:
        """Set the viewport size and pass it on to every window."""
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        for window in self._windows:
            window.width = width
            window.height = height

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds: count frames and update the top window."""
        self._frame_counter += 1
        self._time_since_report += dt
        if self._time_since_report > FPS_REPORT_INTERVAL:
            self.fps = int(self._frame_counter / self._time_since_report)
            logger.debug("frames per second: %d", self.fps)
            self._time_since_report = 0.0
            self._frame_counter = 0

        window = self.top_window
        if window is not None:
            window.update(dt)

    def handle_key_input(self, key: int, action: int) -> None:
        """Pass a key event to the top window."""
        window = self.top_window
        if window is not None:
            window.handle_key_press(key, action)

    def mouse_down(self, x: int, y: int) -> None:
        """Pass a button press to the top window."""
        window = self.top_window
        if window is not None:
            window.mouse_down(x, y)

    def mouse_move(self, x: int, y: int) -> None:
        """Pass pointer movement to the top window."""
        window = self.top_window
        if window is not None:
            window.mouse_move(x, y)

    def mouse_up(self, was_focused: bool) -> None:
        """Pass a button release to the top window."""
        window = self.top_window
        if window is not None:
            window.mouse_up(was_focused)

    def mouse_wheel(self, delta: int) -> None:
        """Pass a wheel turn to the top window."""
        window = self.top_window
        if window is not None:
            window.mouse_wheel(delta)

    def clear_focus(self) -> None:
        """Clear focus in the top window."""
        window = self.top_window
        if window is not None:
            window.clear_focus()

    def push_window(self, window: Window) -> None:
        """Put a window on top of the stack, sized to the viewport."""
        window.width = self.width
        window.height = self.height
        self._windows.append(window)

    def pop_window(self) -> Optional[Window]:
        """Remove and return the top window, or None if the stack is empty."""
        return self._windows.pop() if self._windows else None