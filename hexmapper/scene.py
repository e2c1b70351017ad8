"""A collection of renderables updated and notified together."""

from __future__ import annotations

from collections.abc import Iterator

from hexmapper.renderable import Renderable


class Scene:
    """An ordered list of renderables that fans out frame and input events."""

    def __init__(self) -> None:
        self._renderables: list[Renderable] = []

    def update(self, dt: float) -> None:
        """Advance every renderable by ``dt`` seconds."""
        for renderable in self._renderables:
            renderable.update(dt)

    def mouse_moved(self, x: float, y: float) -> None:
        """Tell every renderable the pointer moved to world position ``(x, y)``."""
        for renderable in self._renderables:
            renderable.mouse_moved(x, y)

    def mouse_clicked(self, x: float, y: float) -> None:
        """Tell every renderable about a click at world position ``(x, y)``."""
        for renderable in self._renderables:
            renderable.mouse_clicked(x, y)

    def clear_focus(self) -> None:
        """Clear focus on every renderable."""
        for renderable in self._renderables:
            renderable.clear_focus()

    def add(self, renderable: Renderable) -> None:
        """Append a renderable to the scene."""
        self._renderables.append(renderable)

    def remove(self, renderable: Renderable) -> None:
        """Remove every occurrence of this very renderable; absent ones are ignored."""
        self._renderables = [r for r in self._renderables if r is not renderable]

    def __len__(self) -> int:
        return len(self._renderables)

    def __iter__(self) -> Iterator[Renderable]:
        return iter(self._renderables)