"""Grid-based A* pathfinding with 8-directional movement."""

from __future__ import annotations

import logging
from heapq import heappop, heappush
from typing import Dict, List, Sequence, Set, Tuple

from ..core.errors import NoPathFoundError, OutOfBoundsError
from ..core.grid import Coord, Grid, SearchNode


logger = logging.getLogger(__name__)

STRAIGHT_COST = 10
DIAGONAL_COST = 14

# Left, left-down, left-up, right, right-down, right-up, down, up.
# The order decides which of several equal-cost paths is returned.
_NEIGHBOUR_OFFSETS: Tuple[Coord, ...] = (
    (-1, 0),
    (-1, -1),
    (-1, 1),
    (1, 0),
    (1, -1),
    (1, 1),
    (0, -1),
    (0, 1),
)


def octile_distance(a: Coord, b: Coord) -> int:
    """Return the octile distance between two cells.

    Diagonal steps cost :data:`DIAGONAL_COST` and straight steps
    :data:`STRAIGHT_COST`. Used both as the heuristic and as the cost of
    a single move between neighbours.
    """

    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return DIAGONAL_COST * min(dx, dy) + STRAIGHT_COST * abs(dx - dy)


def path_cost(path: Sequence[Coord]) -> int:
    """Return the total movement cost of ``path``.

    Raises ``ValueError`` if two consecutive cells are not neighbours.
    """

    total = 0
    for a, b in zip(path, path[1:]):
        if max(abs(a[0] - b[0]), abs(a[1] - b[1])) != 1:
            raise ValueError(f"{a} and {b} are not adjacent")
        total += octile_distance(a, b)
    return total


class PathSearch:
    """Single-source, single-target A* over a :class:`Grid`.

    The grid is borrowed, not owned: walkability stays under the
    caller's control while every call to :meth:`find_path` overwrites
    the transient cost fields of all nodes. Run one search at a time per
    grid.

    With ``cut_corners`` (the default) a diagonal step is offered even
    when both orthogonal cells it squeezes between are blocked. Pass
    ``False`` to require both of them to be walkable.
    """

    def __init__(self, grid: Grid, cut_corners: bool = True) -> None:
        self.grid = grid
        self.cut_corners = cut_corners
        self.last_expanded: int = 0

    # ------------------------------------------------------------------
    # Grid passthroughs
    # ------------------------------------------------------------------
    def node(self, x: int, y: int) -> SearchNode:
        return self.grid.cell_at(x, y)

    def is_walkable(self, x: int, y: int) -> bool:
        return self.grid.is_walkable(x, y)

    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        self.grid.set_walkable(x, y, walkable)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def find_path(self, start_x: int, start_y: int, end_x: int, end_y: int) -> List[Coord]:
        """Return the cells from start to end inclusive.

        Raises :class:`OutOfBoundsError` before searching if either
        endpoint lies outside the grid, and :class:`NoPathFoundError`
        when the open set runs dry.
        """

        grid = self.grid
        for x, y in ((start_x, start_y), (end_x, end_y)):
            if not grid.in_bounds(x, y):
                raise OutOfBoundsError(x, y, grid.width, grid.height)

        grid.reset_search_state()
        start = grid.cell_at(start_x, start_y)
        end = grid.cell_at(end_x, end_y)
        goal = end.coord

        start.g_cost = 0
        start.h_cost = octile_distance(start.coord, goal)
        start.calculate_f_cost()

        # Heap entries are (f_cost, first_seen, x, y). ``first_seen`` is
        # fixed the first time a cell enters the open set so equal f
        # costs resolve in discovery order. Entries whose f_cost no
        # longer matches the node are stale and skipped.
        open_heap: List[Tuple[float, int, int, int]] = []
        heappush(open_heap, (start.f_cost, 0, start.x, start.y))
        first_seen: Dict[Coord, int] = {start.coord: 0}
        closed: Set[Coord] = set()

        logger.debug(
            "Searching %s -> %s on %dx%d grid",
            start.coord, goal, grid.width, grid.height,
        )

        while open_heap:
            f_cost, _, x, y = heappop(open_heap)
            if (x, y) in closed:
                continue
            current = grid.cell_at(x, y)
            if f_cost != current.f_cost:
                continue

            if current is end:
                self.last_expanded = len(closed)
                path = self._reconstruct(end)
                logger.debug(
                    "Path %s -> %s found: %d cells, cost %s, %d cells closed",
                    start.coord, goal, len(path), end.g_cost, self.last_expanded,
                )
                return path

            closed.add(current.coord)

            for neighbour in self._neighbours(current):
                coord = neighbour.coord
                if coord in closed:
                    continue
                if not neighbour.walkable:
                    closed.add(coord)
                    continue

                tentative_g = current.g_cost + octile_distance(current.coord, coord)
                if tentative_g < neighbour.g_cost:
                    neighbour.came_from = current.coord
                    neighbour.g_cost = tentative_g
                    neighbour.h_cost = octile_distance(coord, goal)
                    neighbour.calculate_f_cost()
                    if coord not in first_seen:
                        first_seen[coord] = len(first_seen)
                    heappush(
                        open_heap,
                        (neighbour.f_cost, first_seen[coord], neighbour.x, neighbour.y),
                    )

        self.last_expanded = len(closed)
        logger.debug(
            "No path %s -> %s, %d cells closed", start.coord, goal, self.last_expanded
        )
        raise NoPathFoundError(start.coord, goal)

    def find_path_world(
        self, start_pos: Tuple[float, float], end_pos: Tuple[float, float]
    ) -> List[Tuple[float, float]]:
        """Search between two world positions.

        Returns the centres of the path cells in world coordinates.
        """

        sx, sy = self.grid.world_to_cell(*start_pos)
        ex, ey = self.grid.world_to_cell(*end_pos)
        path = self.find_path(sx, sy, ex, ey)
        return [self.grid.cell_to_world(x, y) for x, y in path]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _neighbours(self, node: SearchNode) -> List[SearchNode]:
        grid = self.grid
        result: List[SearchNode] = []
        for dx, dy in _NEIGHBOUR_OFFSETS:
            nx, ny = node.x + dx, node.y + dy
            if not grid.in_bounds(nx, ny):
                continue
            if dx and dy and not self.cut_corners:
                # both flanking cells are in bounds whenever the diagonal is
                if not (grid.is_walkable(node.x + dx, node.y) and grid.is_walkable(node.x, node.y + dy)):
                    continue
            result.append(grid.cell_at(nx, ny))
        return result

    def _reconstruct(self, end: SearchNode) -> List[Coord]:
        path = [end.coord]
        current = end
        while current.came_from is not None:
            current = self.grid.cell_at(*current.came_from)
            path.append(current.coord)
        path.reverse()
        return path


__all__ = [
    "STRAIGHT_COST",
    "DIAGONAL_COST",
    "octile_distance",
    "path_cost",
    "PathSearch",
]
