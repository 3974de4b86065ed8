from pathlib import Path

from grid_pathfinding.config import load_config
from grid_pathfinding.main import bootstrap, main


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(body)
    return path


def test_bootstrap_builds_search_from_config(tmp_path):
    path = _write_config(
        tmp_path,
        "grid:\n"
        "  width: 6\n"
        "  height: 3\n"
        "  cell_size: 2.0\n"
        "  origin: [1.0, 1.0]\n"
        "  blocked: [[2, 0], [2, 1]]\n"
        "search:\n"
        "  cut_corners: false\n",
    )
    search = bootstrap(load_config(path))
    assert search.grid.size == (6, 3)
    assert search.grid.cell_size == 2.0
    assert search.grid.origin == (1.0, 1.0)
    assert not search.is_walkable(2, 0)
    assert not search.is_walkable(2, 1)
    assert search.is_walkable(2, 2)
    assert search.cut_corners is False


def test_main_renders_default_route(restore_logging, capsys):
    restore_logging.append("grid_pathfinding.search.pathfinding")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 12
    assert "S" in out and "G" in out


def test_main_reports_unreachable_goal(restore_logging, tmp_path, capsys):
    path = _write_config(
        tmp_path,
        "grid:\n"
        "  width: 3\n"
        "  height: 3\n"
        "  blocked: [[1, 0], [1, 1], [1, 2]]\n"
        "demo:\n"
        "  start: [0, 0]\n"
        "  goal: [2, 2]\n",
    )
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.count("#") == 3


def test_main_rejects_out_of_bounds_route(restore_logging, tmp_path):
    path = _write_config(
        tmp_path,
        "grid:\n"
        "  width: 3\n"
        "  height: 3\n"
        "demo:\n"
        "  start: [0, 0]\n"
        "  goal: [3, 0]\n",
    )
    assert main([str(path)]) == 2
