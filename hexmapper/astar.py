"""A* path finding over a hex map."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

from hexmapper.hexmap import WHITE, HexMap, hex_distance
from hexmapper.vector import Vec3

logger = logging.getLogger(__name__)

Coord = tuple[int, int]

_ODD_ROW_STEPS = ((-1, 0), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1))
_EVEN_ROW_STEPS = ((-1, 0), (-1, -1), (0, -1), (1, 0), (0, 1), (-1, 1))

CLOSE_COLOR = Vec3(0.0, 0.0, 1.0)
FAR_COLOR = Vec3(1.0, 0.0, 0.0)
QUEUED_COLOR = Vec3(0.8, 0.8, 0.8)
PATH_COLOR = Vec3(0.0, 1.0, 0.0)


def hex_neighbors(x: int, y: int) -> list[Coord]:
    """The six tiles adjacent to ``(x, y)``; the offsets depend on the row's parity."""
    steps = _ODD_ROW_STEPS if y % 2 else _EVEN_ROW_STEPS
    return [(x + dx, y + dy) for dx, dy in steps]


@dataclass
class _Node:
    coord: Coord
    g: int
    h: int
    link: Coord | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


def _check_grid(grid: object) -> HexMap:
    if not isinstance(grid, HexMap):
        raise TypeError(f"expected a HexMap, got {type(grid).__name__}")
    return grid


class AStarSolver:
    """Finds the cheapest path between two hexes and remembers the search."""

    def __init__(self) -> None:
        self._visited: dict[Coord, _Node] = {}
        self._queued: dict[Coord, _Node] = {}
        self.path: list[Coord] = []

    @property
    def visited(self) -> frozenset[Coord]:
        """Tiles the last search expanded."""
        return frozenset(self._visited)

    @property
    def queued(self) -> frozenset[Coord]:
        """Tiles the last search queued but never expanded."""
        return frozenset(self._queued)

    def solve(self, grid: HexMap, start_x: int, start_y: int, target_x: int, target_y: int) -> list[Coord]:
        """Return the cheapest path from start to target inclusive, or [] if none exists."""
        grid = _check_grid(grid)
        self._visited = {}
        self._queued = {}
        self.path = []

        start = (start_x, start_y)
        target = (target_x, target_y)
        counter = itertools.count()
        heap: list[tuple[int, int, int, _Node]] = []

        def push(node: _Node) -> None:
            heapq.heappush(heap, (node.f, node.h, next(counter), node))

        first = _Node(start, 0, hex_distance(start_x, start_y, target_x, target_y))
        self._queued[start] = first
        push(first)

        found: _Node | None = None
        while self._queued and heap and found is None:
            f, _, _, node = heapq.heappop(heap)
            if self._queued.get(node.coord) is not node or f != node.f:
                continue

            self._visited[node.coord] = node
            del self._queued[node.coord]

            if node.coord == target:
                found = node
                continue

            for neighbor in hex_neighbors(*node.coord):
                if neighbor in self._visited:
                    continue
                cost = grid.tile_cost(*neighbor)
                if cost is None:
                    continue
                g = node.g + cost
                queued = self._queued.get(neighbor)
                if queued is not None:
                    if queued.g > g:
                        queued.g = g
                        queued.link = node.coord
                        push(queued)
                else:
                    new_node = _Node(
                        neighbor, g, hex_distance(*neighbor, target_x, target_y), node.coord
                    )
                    self._queued[neighbor] = new_node
                    push(new_node)

        if found is None:
            logger.info("target node not found")
            return []

        path = []
        current = found
        while current.coord != start:
            path.append(current.coord)
            current = self._visited[current.link]
        path.append(start)
        path.reverse()
        self.path = path
        logger.info("found path: %s", " -> ".join(f"{{{x}, {y}}}" for x, y in path))
        return list(path)

    def render_debug(self, grid: HexMap) -> None:
        """Tint the map: expanded tiles blue to red by cost, queued grey, path green."""
        grid = _check_grid(grid)
        if self._visited:
            scores = [node.f for node in self._visited.values()]
            low, high = min(scores), max(scores)
            spread = high - low
            for coord, node in self._visited.items():
                t = (node.f - low) / spread if spread else 0.0
                grid.set_color(*coord, CLOSE_COLOR + (FAR_COLOR - CLOSE_COLOR) * t)
        for coord in self._queued:
            grid.set_color(*coord, QUEUED_COLOR)
        for coord in self.path:
            grid.set_color(*coord, PATH_COLOR)

    def clear_debug(self, grid: HexMap) -> None:
        """Reset the tint of every tile the last search touched."""
        grid = _check_grid(grid)
        for coord in (*self._visited, *self._queued):
            grid.set_color(*coord, WHITE)