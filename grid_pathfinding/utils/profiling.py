"""cProfile helpers for measuring path search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Callable


def profile_searches(
    n: int,
    search_callback: Callable[[], object],
    out_path: str | Path = "search.prof",
) -> pstats.Stats:
    """Profile ``search_callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to profile.
    search_callback:
        Function running one search, e.g. a ``functools.partial`` of
        :meth:`PathSearch.find_path`.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        search_callback()
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]
