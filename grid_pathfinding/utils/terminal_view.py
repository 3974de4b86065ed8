"""ASCII terminal renderer for walkability grids and paths."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from ..core.grid import Coord, Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPHS = {
    "open": (".", "white"),
    "blocked": ("#", "blue"),
    "path": ("*", "yellow"),
    "start": ("S", "green"),
    "goal": ("G", "red"),
}


def render_lines(grid: Grid, path: Sequence[Coord] | None = None, colour: bool = False) -> list[str]:
    """Return one string per grid row, ``y = 0`` first.

    Cells on ``path`` are drawn as ``*`` with ``S`` and ``G`` marking its
    first and last cell.
    """

    kinds: dict[Coord, str] = {}
    if path:
        for cell in path:
            kinds[cell] = "path"
        kinds[path[0]] = "start"
        kinds[path[-1]] = "goal"

    lines: list[str] = []
    for y in range(grid.height):
        row: list[str] = []
        for x in range(grid.width):
            kind = kinds.get((x, y))
            if kind is None:
                kind = "open" if grid.is_walkable(x, y) else "blocked"
            glyph, glyph_colour = _GLYPHS[kind]
            row.append(f"{_COLOURS[glyph_colour]}{glyph}" if colour else glyph)
        if colour:
            row.append(_COLOURS["reset"])
        lines.append("".join(row))
    return lines


class TerminalView:
    """Minimal grid viewer using ANSI colours."""

    def __init__(self, colour: bool = True, stream: TextIO | None = None) -> None:
        self.colour = colour
        self.enabled: bool = True
        self._stream = stream

    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled after toggle."""

        self.enabled = not self.enabled
        return self.enabled

    def render(self, grid: Grid, path: Sequence[Coord] | None = None) -> None:
        """Write ``grid`` and ``path`` to the view's stream."""

        if not self.enabled:
            return
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write("\n".join(render_lines(grid, path, self.colour)) + "\n")
        stream.flush()


__all__ = ["TerminalView", "render_lines"]
