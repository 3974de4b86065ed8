from pathlib import Path

import yaml

from grid_pathfinding.config import (
    CONFIG,
    CONFIG_PATH,
    DemoConfig,
    GridConfig,
    LoggingConfig,
    SearchConfig,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.grid, GridConfig)
    assert isinstance(CONFIG.search, SearchConfig)
    assert isinstance(CONFIG.demo, DemoConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert (CONFIG.grid.width, CONFIG.grid.height) == (20, 12)
    assert CONFIG.search.cut_corners is True
    assert CONFIG.demo.start == (0, 0)
    assert CONFIG.demo.goal == (19, 11)


def test_config_file_contains_expected_keys():
    data = yaml.safe_load(CONFIG_PATH.read_text())
    assert set(data) == {"grid", "search", "demo", "logging"}
    assert [9, 10] not in data["grid"]["blocked"]
    assert len(data["grid"]["blocked"]) == len(CONFIG.grid.blocked)
    assert all(isinstance(cell, tuple) for cell in CONFIG.grid.blocked)


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.grid == GridConfig()
    assert cfg.search.cut_corners is True
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_partial_file_fills_defaults(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "grid:\n"
        "  width: 8\n"
        "  height: 4\n"
        "  cell_size: 0.25\n"
        "  blocked: [[1, 2]]\n"
        "search:\n"
        "  cut_corners: false\n"
        "logging:\n"
        "  global_level: debug\n"
    )
    cfg = load_config(path)
    assert (cfg.grid.width, cfg.grid.height, cfg.grid.cell_size) == (8, 4, 0.25)
    assert cfg.grid.origin == (0.0, 0.0)
    assert cfg.grid.blocked == [(1, 2)]
    assert cfg.search.cut_corners is False
    assert cfg.demo.goal == (7, 3)
    assert cfg.logging.global_level == "DEBUG"


def test_empty_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path).demo == DemoConfig()
