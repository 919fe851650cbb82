"""
Reference counter: plain depth-first search over every pattern.

No canonicalization and no memoization, so the cost grows with the number
of patterns itself. Only usable up to 3x3 grids, where it cross-checks the
memoized engine.
"""

from localtypes import Count, Point

from .geometry import points_between


def count_patterns_naive(size: int, min_length: int) -> Count:
    if size < 0:
        raise ValueError(f"Grid size must be non-negative, got {size}")
    grid = {Point(row, col) for row in range(size) for col in range(size)}

    def explore(last: Point | None, unused: set[Point], length: int) -> Count:
        count = 1 if length >= min_length else 0
        for candidate in list(unused):
            if last is not None and not points_between(last, candidate).isdisjoint(unused):
                continue
            unused.remove(candidate)
            count += explore(candidate, unused, length + 1)
            unused.add(candidate)
        return count

    return explore(None, grid, 0)
