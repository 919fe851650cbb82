"""
Interning of grid points.

Canonicalization rebuilds every point of a state several times per step,
so a table hands out one shared Point instance per coordinate.
"""

from localtypes import Col, Point, Row
from utils.cache import Cache


class PointTable:
    """Maps (row, col) to a single Point instance."""

    def __init__(self) -> None:
        self._points: Cache[tuple[Row, Col], Point] = Cache("points")

    def at(self, row: Row, col: Col) -> Point:
        return self._points.get_or_compute((row, col), lambda: Point(row, col))

    def grid(self, size: int) -> frozenset[Point]:
        """All points of a (size x size) grid."""
        return frozenset(
            self.at(row, col) for row in range(size) for col in range(size)
        )

    def __len__(self) -> int:
        return len(self._points)
