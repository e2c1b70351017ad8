"""A rectangular map of offset hex tiles with hover and click handling."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from hexmapper.renderable import Renderable
from hexmapper.vector import Vec3

logger = logging.getLogger(__name__)

WHITE = Vec3(1.0, 1.0, 1.0)
HIGHLIGHT_BOOST = 0.25
DEFAULT_DIMENSIONS = 25

_ROW_HEIGHT = 0.75
_NO_MATCH_DISTANCE = 10000000.0

# Movement cost per resource id; ids not listed are impassable.
_TILE_COSTS = {1: 1, 2: 1, 11: 10}

Coord = tuple[int, int]


def _c_remainder(value: int, divisor: int) -> int:
    """Remainder with the sign of the dividend, as integer division truncates."""
    remainder = abs(value) % divisor
    return remainder if value >= 0 else -remainder


def hex_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Number of steps between two tiles of the offset hex grid."""
    sx1 = _c_remainder(y1, 2) + x1 * 2
    sx2 = _c_remainder(y2, 2) + x2 * 2

    if y1 == y2:
        return abs(x2 - x1)
    if sx1 == sx2:
        return abs(y2 - y1)
    if (sx1 < sx2 and y1 < y2) or (sx1 > sx2 and y1 > y2):
        return max(abs(y2 - y1), abs((sx2 - y1) * -1 - (sx1 - y2) * -1) // 2)
    return max(abs(y2 - y1), abs((sx2 - y2) * -1 - (sx1 - y1) * -1) // 2)


@dataclass
class HexTile:
    """One tile: the resource it shows and the tint it is drawn with."""

    resource_id: int = 0
    color: Vec3 = field(default_factory=lambda: WHITE)


class HexMap(Renderable):
    """A square grid of hex tiles in odd-row offset layout."""

    def __init__(
        self,
        dimensions: int = DEFAULT_DIMENSIONS,
        on_click: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        super().__init__()
        if dimensions <= 0:
            raise ValueError("a hex map needs a positive size")
        self.dimensions = dimensions
        self.on_click = on_click
        self.highlight: Optional[Coord] = None
        self._tiles = [HexTile() for _ in range(dimensions * dimensions)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.dimensions and 0 <= y < self.dimensions

    def tile(self, x: int, y: int) -> HexTile:
        """The tile at ``(x, y)``; raises IndexError outside the map."""
        if not self._in_bounds(x, y):
            raise IndexError(f"hex ({x}, {y}) is outside the map")
        return self._tiles[y * self.dimensions + x]

    def set_tile(self, x: int, y: int, resource_id: int) -> None:
        """Show ``resource_id`` on the tile at ``(x, y)``."""
        self.tile(x, y).resource_id = resource_id

    def set_active_tile(self, resource_id: int) -> bool:
        """Set the highlighted tile's resource; False when nothing is highlighted."""
        if self.highlight is None:
            return False
        self.set_tile(*self.highlight, resource_id)
        return True

    def clear(self, resource_id: int) -> None:
        """Reset every tile to ``resource_id`` and a white tint."""
        for tile in self._tiles:
            tile.resource_id = resource_id
            tile.color = WHITE

    def set_color(self, x: int, y: int, color: Vec3) -> None:
        """Tint the tile at ``(x, y)``; coordinates outside the map are ignored."""
        if self._in_bounds(x, y):
            self._tiles[y * self.dimensions + x].color = color

    def tile_tint(self, x: int, y: int) -> Vec3:
        """The colour the tile is drawn with, brightened while highlighted."""
        color = self.tile(x, y).color
        if self.highlight == (x, y):
            return color + HIGHLIGHT_BOOST
        return color

    def tile_cost(self, x: int, y: int) -> Optional[int]:
        """Cost of entering the tile, or None if it cannot be entered."""
        if not self._in_bounds(x, y):
            return None
        return _TILE_COSTS.get(self._tiles[y * self.dimensions + x].resource_id)

    def _base_offset_x(self) -> float:
        return self.dimensions / 2.0 - 0.5

    def world_position(self, x: int, y: int) -> Vec3:
        """World-space centre of the hex at ``(x, y)``."""
        base_y = (self.dimensions * _ROW_HEIGHT) / 2.0 - 0.125
        x_offset = 0.0 if y % 2 == 0 else 0.5
        position = Vec3(self._base_offset_x() - (x + x_offset), base_y - y * _ROW_HEIGHT, 0.0)
        logger.debug("hex world position: %s", position)
        return position

    def closest_hex(self, x: float, y: float) -> Optional[Coord]:
        """The hex nearest to world point ``(x, y)``, or None if none is near."""
        point = Vec3(x, y, 0.0)
        base_x = self._base_offset_x()
        base_y = (self.dimensions * _ROW_HEIGHT) / 2.0 - 0.375
        closest = _NO_MATCH_DISTANCE
        best: Optional[Coord] = None
        for row in range(self.dimensions):
            x_offset = 0.0 if row % 2 == 0 else 0.5
            row_y = base_y - row * _ROW_HEIGHT
            for column in range(self.dimensions):
                delta = point - Vec3(base_x - (column + x_offset), row_y, 0.0)
                distance = delta.dot(delta)
                if distance < closest:
                    closest = distance
                    best = (column, row)
        return best

    def mouse_moved(self, x: float, y: float) -> None:
        """Highlight the hex under the pointer."""
        self.highlight = self.closest_hex(x, y)

    def mouse_clicked(self, x: float, y: float) -> Optional[Coord]:
        """Report the clicked hex to ``on_click`` and return it."""
        hex_coord = self.closest_hex(x, y)
        logger.info("hex tile clicked on: %s", hex_coord)
        if hex_coord is not None and self.on_click is not None:
            self.on_click(*hex_coord)
        return hex_coord

    def clear_focus(self) -> None:
        """Remove the highlight."""
        self.highlight = None