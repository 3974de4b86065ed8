from functools import partial
from pathlib import Path
import pstats

from grid_pathfinding.core.grid import Grid
from grid_pathfinding.search.pathfinding import PathSearch
from grid_pathfinding.utils.profiling import profile_searches


def test_profile_searches_creates_dump(tmp_path: Path) -> None:
    search = PathSearch(Grid(30, 30))
    paths: list[list[tuple[int, int]]] = []

    def run() -> None:
        paths.append(search.find_path(0, 0, 29, 17))

    out = tmp_path / "search.prof"
    stats = profile_searches(3, run, out)

    assert out.exists()
    assert isinstance(stats, pstats.Stats)
    assert len(paths) == 3
    assert paths[0] == paths[1] == paths[2]


def test_profile_searches_accepts_partial(tmp_path: Path) -> None:
    search = PathSearch(Grid(8, 8))
    out = tmp_path / "partial.prof"
    profile_searches(2, partial(search.find_path, 0, 0, 7, 7), str(out))
    assert out.exists()
