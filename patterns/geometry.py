"""
Line of sight between two grid points.

A segment from a to b passes exactly over the grid points reached by
stepping (d_row / g, d_col / g) from a, where g = gcd(|d_row|, |d_col|).
Horizontal and vertical segments are the special cases where one of the
deltas is zero.
"""

import math
from collections.abc import Callable

from localtypes import Col, Point, Row
from utils.cache import Cache

type PointFactory = Callable[[Row, Col], Point]


def points_between(a: Point, b: Point, at: PointFactory = Point) -> frozenset[Point]:
    """
    Computes the grid points lying strictly inside the segment from a to b.

    Args:
        a: First end of the segment.
        b: Second end of the segment.
        at: Constructor used for the resulting points (e.g. an interning table).

    Returns:
        Frozenset of intermediate points, empty for adjacent points or when
        the segment crosses no grid point.
    """
    if a.col == b.col:
        low, high = sorted((a.row, b.row))
        return frozenset(at(row, a.col) for row in range(low + 1, high))

    if a.row == b.row:
        low, high = sorted((a.col, b.col))
        return frozenset(at(a.row, col) for col in range(low + 1, high))

    d_row = b.row - a.row
    d_col = b.col - a.col
    steps = math.gcd(d_row, d_col)
    step_row, step_col = d_row // steps, d_col // steps
    return frozenset(
        at(a.row + i * step_row, a.col + i * step_col) for i in range(1, steps)
    )


class LineOfSight:
    """Cached points_between, keyed by the unordered pair of end points."""

    def __init__(self, at: PointFactory = Point) -> None:
        self._at = at
        self._between: Cache[tuple[Point, Point], frozenset[Point]] = Cache(
            "between"
        )

    def between(self, a: Point, b: Point) -> frozenset[Point]:
        key = (a, b) if a <= b else (b, a)
        return self._between.get_or_compute(
            key, lambda: points_between(key[0], key[1], self._at)
        )

    def __len__(self) -> int:
        return len(self._between)
