"""
Tests for point interning and line of sight.
"""

import pytest

from localtypes import Point
from patterns import LineOfSight, PointTable, points_between


class TestPointTable:
    def test_interning(self):
        points = PointTable()
        assert points.at(1, 2) is points.at(1, 2)
        assert points.at(1, 2) == Point(1, 2)
        assert len(points) == 1

    def test_grid(self):
        points = PointTable()
        grid = points.grid(3)
        assert len(grid) == 9
        assert Point(2, 2) in grid
        assert Point(3, 0) not in grid
        assert all(point is points.at(*point) for point in grid)

    def test_empty_grid(self):
        assert PointTable().grid(0) == frozenset()

    def test_tables_are_independent(self):
        assert PointTable().at(0, 0) is not PointTable().at(0, 0)


class TestPointsBetween:
    @pytest.mark.parametrize(
        "neighbor", [(0, 1), (1, 0), (1, 1), (1, 2), (2, 1), (0, 2), (2, 0), (2, 2)]
    )
    def test_adjacent_points(self, neighbor):
        """The 8 neighbors of the center are in direct sight."""
        assert points_between(Point(1, 1), Point(*neighbor)) == frozenset()

    def test_same_row(self):
        assert points_between(Point(0, 0), Point(0, 2)) == {Point(0, 1)}
        assert points_between(Point(0, 3), Point(0, 0)) == {Point(0, 1), Point(0, 2)}

    def test_same_column(self):
        assert points_between(Point(0, 1), Point(2, 1)) == {Point(1, 1)}
        assert points_between(Point(4, 0), Point(0, 0)) == {
            Point(1, 0),
            Point(2, 0),
            Point(3, 0),
        }

    def test_diagonal(self):
        assert points_between(Point(0, 0), Point(2, 2)) == {Point(1, 1)}

    def test_anti_diagonal(self):
        assert points_between(Point(3, 0), Point(0, 3)) == {Point(2, 1), Point(1, 2)}

    def test_knight_move(self):
        """gcd(2, 1) == 1: no grid point on the segment."""
        assert points_between(Point(0, 0), Point(2, 1)) == frozenset()
        assert points_between(Point(0, 0), Point(1, 2)) == frozenset()

    def test_long_slope(self):
        assert points_between(Point(0, 0), Point(2, 4)) == {Point(1, 2)}
        assert points_between(Point(4, 0), Point(0, 2)) == {Point(2, 1)}
        assert points_between(Point(0, 0), Point(3, 2)) == frozenset()

    def test_symmetric(self):
        a, b = Point(4, 1), Point(0, 3)
        assert points_between(a, b) == points_between(b, a) == {Point(2, 2)}

    def test_custom_factory(self):
        points = PointTable()
        (middle,) = points_between(Point(0, 0), Point(0, 2), points.at)
        assert middle is points.at(0, 1)


class TestLineOfSight:
    def test_between(self):
        line_of_sight = LineOfSight()
        assert line_of_sight.between(Point(0, 0), Point(2, 2)) == {Point(1, 1)}
        assert line_of_sight.between(Point(0, 0), Point(2, 1)) == frozenset()

    def test_unordered_pair_shares_entry(self):
        line_of_sight = LineOfSight()
        a, b = Point(0, 0), Point(0, 2)
        assert line_of_sight.between(a, b) is line_of_sight.between(b, a)
        assert len(line_of_sight) == 1

    def test_interned_results(self):
        points = PointTable()
        line_of_sight = LineOfSight(points.at)
        (middle,) = line_of_sight.between(points.at(2, 0), points.at(0, 2))
        assert middle is points.at(1, 1)
