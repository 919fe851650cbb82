"""
Partially drawn patterns.

Only the last point and the set of unused points matter for the future of
a pattern: the order in which the used points were visited never changes
which moves are legal next, nor how many completions exist.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from localtypes import Box, Point, Proportions, box_to_proportions

from .geometry import LineOfSight
from .points import PointTable


@dataclass(frozen=True)
class PatternState:
    """A pattern reduced to its last point and its unused points"""

    last: Point | None
    unused: frozenset[Point]

    def bounds(self) -> Box:
        """Bounding box of the last point and the unused points."""
        assert self.last is not None, "The empty pattern has no bounds"
        rows = [self.last.row, *(point.row for point in self.unused)]
        cols = [self.last.col, *(point.col for point in self.unused)]
        return Point(min(rows), min(cols)), Point(max(rows), max(cols))

    def proportions(self) -> Proportions:
        return box_to_proportions(self.bounds())

    def map_points(self, mapper: Callable[[Point], Point]) -> PatternState:
        """Applies mapper to every point of the state."""
        assert self.last is not None, "The empty pattern cannot be mapped"
        return PatternState(
            mapper(self.last), frozenset(mapper(point) for point in self.unused)
        )

    def __str__(self) -> str:
        unused = ", ".join(str(point) for point in sorted(self.unused))
        return f"{self.last} -> {{{unused}}}"


def empty_state(size: int, points: PointTable) -> PatternState:
    """The pattern with no point drawn yet on a (size x size) grid."""
    return PatternState(None, points.grid(size))


def is_legal_successor(
    state: PatternState, candidate: Point, line_of_sight: LineOfSight
) -> bool:
    """
    Whether the move from the last point to candidate is legal.

    A move may only pass over points that were already visited.
    """
    if state.last is None:
        return True
    return line_of_sight.between(state.last, candidate).isdisjoint(state.unused)


def append(state: PatternState, candidate: Point) -> PatternState:
    if candidate not in state.unused:
        raise ValueError(f"{candidate} is not an unused point of {state}")
    return PatternState(candidate, state.unused - {candidate})


def legal_successors(
    state: PatternState, line_of_sight: LineOfSight
) -> list[PatternState]:
    return [
        append(state, candidate)
        for candidate in state.unused
        if is_legal_successor(state, candidate, line_of_sight)
    ]
