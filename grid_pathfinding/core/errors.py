"""Error types raised by the grid and path search."""

from __future__ import annotations

from typing import Tuple


class PathfindingError(Exception):
    """Base error for grid pathfinding."""


class OutOfBoundsError(PathfindingError, IndexError):
    """Raised when a cell coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"cell ({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class NoPathFoundError(PathfindingError):
    """Raised when the goal cannot be reached from the start."""

    def __init__(self, start: Tuple[int, int], goal: Tuple[int, int]) -> None:
        super().__init__(f"no path from {start} to {goal}")
        self.start = start
        self.goal = goal


__all__ = ["PathfindingError", "OutOfBoundsError", "NoPathFoundError"]
