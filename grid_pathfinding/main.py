"""Grid bootstrap and demo route runner."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import CONFIG_PATH, Config, LoggingConfig, load_config
from .core.errors import NoPathFoundError, OutOfBoundsError
from .core.grid import Grid
from .search.pathfinding import PathSearch, path_cost
from .utils.terminal_view import TerminalView


logger = logging.getLogger(__name__)


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(cfg: Config) -> PathSearch:
    """Build a :class:`Grid` and :class:`PathSearch` from ``cfg``."""

    grid = Grid.from_blocked(
        cfg.grid.width,
        cfg.grid.height,
        cfg.grid.blocked,
        cell_size=cfg.grid.cell_size,
        origin=cfg.grid.origin,
    )
    logger.info(
        "[Bootstrap] %dx%d grid with %d blocked cells (cut_corners=%s)",
        grid.width, grid.height, len(cfg.grid.blocked), cfg.search.cut_corners,
    )
    return PathSearch(grid, cut_corners=cfg.search.cut_corners)


def main(argv: list[str] | None = None) -> int:
    """Search the configured demo route and print it.

    Returns 0 when a path is found, 1 when the goal is unreachable and 2
    when an endpoint lies outside the grid.
    """

    args = sys.argv[1:] if argv is None else argv
    cfg = load_config(Path(args[0]) if args else CONFIG_PATH)
    configure_logging(cfg.logging)

    search = bootstrap(cfg)
    (sx, sy), (gx, gy) = cfg.demo.start, cfg.demo.goal
    try:
        path = search.find_path(sx, sy, gx, gy)
    except OutOfBoundsError as exc:
        logger.error("Demo route rejected: %s", exc)
        return 2
    except NoPathFoundError as exc:
        logger.warning("Demo route unreachable: %s", exc)
        TerminalView().render(search.grid)
        return 1

    logger.info(
        "Path from %s to %s: %d cells, cost %d",
        cfg.demo.start, cfg.demo.goal, len(path), path_cost(path),
    )
    TerminalView().render(search.grid, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
