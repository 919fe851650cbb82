"""
Type definitions for pattern counting.

This module contains the custom types shared by the pattern engine,
organized by their primary use cases.
"""

from __future__ import annotations

from typing import NamedTuple

# Type aliases for improving code readability
Row = int
Col = int
Height = int
Width = int
Count = int


# Coordinate system: grid[row][col], row 0 at the top
class Point(NamedTuple):
    row: Row
    col: Col

    def __str__(self) -> str:
        return f"({self.row}|{self.col})"


type Box = tuple[Point, Point]  # (top_left, bottom_right) corners


class Proportions(NamedTuple):
    height: Height
    width: Width


def box_to_proportions(box: Box) -> Proportions:
    (row_min, col_min), (row_max, col_max) = box
    return Proportions(row_max - row_min + 1, col_max - col_min + 1)
