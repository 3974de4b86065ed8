"""Simple configuration loader for grid_pathfinding."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Dimensions and initial walkability of the grid."""

    width: int = 20
    height: int = 12
    cell_size: float = 1.0
    origin: tuple[float, float] = (0.0, 0.0)
    blocked: List[Tuple[int, int]] = field(default_factory=list)


@dataclass
class SearchConfig:
    """Options passed to :class:`PathSearch`."""

    cut_corners: bool = True


@dataclass
class DemoConfig:
    """Route searched by ``python -m grid_pathfinding.main``."""

    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] = (19, 11)


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    demo: DemoConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {})
    grid = GridConfig(
        width=int(grid_data.get("width", 20)),
        height=int(grid_data.get("height", 12)),
        cell_size=float(grid_data.get("cell_size", 1.0)),
        origin=tuple(float(v) for v in grid_data.get("origin", [0.0, 0.0])),
        blocked=[(int(x), int(y)) for x, y in grid_data.get("blocked") or []],
    )

    search_data = data.get("search", {})
    search = SearchConfig(cut_corners=bool(search_data.get("cut_corners", True)))

    demo_data = data.get("demo", {})
    demo = DemoConfig(
        start=tuple(int(v) for v in demo_data.get("start", [0, 0])),
        goal=tuple(int(v) for v in demo_data.get("goal", [grid.width - 1, grid.height - 1])),
    )

    logging_data = data.get("logging", {})
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, demo=demo, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "DemoConfig",
    "LoggingConfig",
    "load_config",
]
