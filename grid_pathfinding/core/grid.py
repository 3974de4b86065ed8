"""Walkability grid owning the per-cell search state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import OutOfBoundsError


Coord = Tuple[int, int]

# g cost of a cell the current search has not reached yet
UNREACHED = math.inf


@dataclass(slots=True)
class SearchNode:
    """Transient A* bookkeeping for one grid cell.

    ``walkable`` belongs to the caller and survives every search. The
    cost fields and ``came_from`` are rewritten by each search.
    ``came_from`` holds the coordinate of the previous cell rather than
    the node itself.
    """

    x: int
    y: int
    walkable: bool = True
    g_cost: float = UNREACHED
    h_cost: int = 0
    f_cost: float = UNREACHED
    came_from: Optional[Coord] = None

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def calculate_f_cost(self) -> None:
        self.f_cost = self.g_cost + self.h_cost

    def reset(self) -> None:
        """Forget everything a previous search wrote to this node."""
        self.g_cost = UNREACHED
        self.h_cost = 0
        self.came_from = None
        self.calculate_f_cost()


class Grid:
    """Fixed-size 2D array of :class:`SearchNode` instances.

    ``cell_size`` and ``origin`` map cells to world-space positions so
    callers working in world units can convert to and from cells.
    """

    def __init__(
        self,
        width: int,
        height: int,
        walkable: Callable[[int, int], bool] | None = None,
        cell_size: float = 1.0,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid width and height must be positive")
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self._width = width
        self._height = height
        self.cell_size = float(cell_size)
        self.origin: Tuple[float, float] = (float(origin[0]), float(origin[1]))
        self._nodes: List[List[SearchNode]] = [
            [
                SearchNode(x, y, True if walkable is None else bool(walkable(x, y)))
                for x in range(width)
            ]
            for y in range(height)
        ]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[str], blocked: str = "#", **kwargs) -> "Grid":
        """Build a grid from text rows where ``rows[y][x]`` is one cell.

        Characters found in ``blocked`` mark non-walkable cells. All rows
        must have the same length.
        """
        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(
            width,
            len(rows),
            lambda x, y: rows[y][x] not in blocked,
            **kwargs,
        )

    @classmethod
    def from_blocked(
        cls, width: int, height: int, blocked: Iterable[Coord], **kwargs
    ) -> "Grid":
        """Build a grid where every cell in ``blocked`` is non-walkable."""
        grid = cls(width, height, **kwargs)
        for x, y in blocked:
            grid.set_walkable(x, y, False)
        return grid

    # ------------------------------------------------------------------
    # Dimensions and cell access
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, x: int, y: int) -> SearchNode:
        """Return the node at ``(x, y)`` or raise :class:`OutOfBoundsError`."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return self._nodes[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        return self.cell_at(x, y).walkable

    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        self.cell_at(x, y).walkable = bool(walkable)

    def nodes(self) -> Iterator[SearchNode]:
        """Yield every node row by row."""
        for row in self._nodes:
            yield from row

    def reset_search_state(self) -> None:
        for node in self.nodes():
            node.reset()

    # ------------------------------------------------------------------
    # World-space conversion
    # ------------------------------------------------------------------
    def world_to_cell(self, wx: float, wy: float) -> Coord:
        """Return the cell containing world position ``(wx, wy)``.

        The result is not bounds-checked.
        """
        ox, oy = self.origin
        return (
            math.floor((wx - ox) / self.cell_size),
            math.floor((wy - oy) / self.cell_size),
        )

    def cell_to_world(self, x: int, y: int, centre: bool = True) -> Tuple[float, float]:
        """Return the world position of cell ``(x, y)``.

        With ``centre`` the middle of the cell is returned, otherwise its
        lower corner.
        """
        offset = 0.5 if centre else 0.0
        ox, oy = self.origin
        return (
            ox + (x + offset) * self.cell_size,
            oy + (y + offset) * self.cell_size,
        )


__all__ = ["Coord", "UNREACHED", "SearchNode", "Grid"]
