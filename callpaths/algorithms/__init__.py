"""Path search algorithms over call-graphs."""

from callpaths.algorithms.all_paths import all_paths, count_paths, iter_all_paths

__all__ = [
    "all_paths",
    "count_paths",
    "iter_all_paths",
]
