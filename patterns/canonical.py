r"""
Canonical forms of pattern states.

Two states that differ by a translation, a symmetry of their bounding box,
or a fully used column of a thin strip have the same number of
completions. simplify() maps all of them to one representative so the
counting cache stores the class once.

A canonical state satisfies, in order:
    1\ its bounding box starts at (0, 0)
    2\ it is landscape or square (height <= width)
    3\ its last point is in the upper left part of the box, ties between
       symmetric images being broken by orientation_key()
    4\ a strip of height (width) <= 2 has no empty column (row)
"""

from collections.abc import Callable

from localtypes import Col, Height, Point, Row, Width

from .points import PointTable
from .state import PatternState

type Transformation = Callable[[PatternState, PointTable], PatternState]


# Point maps
def shift(state: PatternState, d_row: int, d_col: int, points: PointTable) -> PatternState:
    return state.map_points(lambda p: points.at(p.row + d_row, p.col + d_col))


def transpose(state: PatternState, points: PointTable) -> PatternState:
    return state.map_points(lambda p: points.at(p.col, p.row))


def flip_vertically(state: PatternState, height: Height, points: PointTable) -> PatternState:
    """Top row becomes the bottom row"""
    return state.map_points(lambda p: points.at(height - p.row - 1, p.col))


def flip_horizontally(state: PatternState, width: Width, points: PointTable) -> PatternState:
    """Left column becomes the right column"""
    return state.map_points(lambda p: points.at(p.row, width - p.col - 1))


def drop_column(state: PatternState, col: Col, points: PointTable) -> PatternState:
    return state.map_points(lambda p: p if p.col < col else points.at(p.row, p.col - 1))


def drop_row(state: PatternState, row: Row, points: PointTable) -> PatternState:
    return state.map_points(lambda p: p if p.row < row else points.at(p.row - 1, p.col))


# Symmetries
def dihedral_images(state: PatternState, points: PointTable) -> list[PatternState]:
    """
    The 8 images of a state under the symmetries of its bounding box.

    The state must already be translated to the origin. The identity comes first.
    """
    height, width = state.proportions()
    images = [state, flip_vertically(state, height, points)]
    images += [flip_horizontally(image, width, points) for image in images]
    return images + [transpose(image, points) for image in images]


def orientation_key(state: PatternState) -> tuple[bool, Point | None, tuple[Point, ...]]:
    """Total order on the images of a state: landscape first, then smallest last point."""
    height, width = state.proportions()
    return height > width, state.last, tuple(sorted(state.unused))


def empty_column(state: PatternState) -> Col | None:
    """Index of the first column with neither the last point nor an unused point."""
    assert state.last is not None
    occupied = {state.last.col} | {point.col for point in state.unused}
    width = state.proportions().width
    return next((col for col in range(width) if col not in occupied), None)


def empty_row(state: PatternState) -> Row | None:
    assert state.last is not None
    occupied = {state.last.row} | {point.row for point in state.unused}
    height = state.proportions().height
    return next((row for row in range(height) if row not in occupied), None)


# Transformations, each returning the state itself when its invariant holds
def translate_to_origin(state: PatternState, points: PointTable) -> PatternState:
    top_left, _ = state.bounds()
    if top_left == (0, 0):
        return state
    return shift(state, -top_left.row, -top_left.col, points)


def orient(state: PatternState, points: PointTable) -> PatternState:
    best = min(dihedral_images(state, points), key=orientation_key)
    return state if best == state else best


def drop_empty_column(state: PatternState, points: PointTable) -> PatternState:
    if state.proportions().height > 2:
        return state
    col = empty_column(state)
    return state if col is None else drop_column(state, col, points)


def drop_empty_row(state: PatternState, points: PointTable) -> PatternState:
    if state.proportions().width > 2:
        return state
    row = empty_row(state)
    return state if row is None else drop_row(state, row, points)


TRANSFORMATIONS: tuple[Transformation, ...] = (
    translate_to_origin,
    orient,
    drop_empty_column,
    drop_empty_row,
)


def simplify(state: PatternState, points: PointTable) -> PatternState:
    """
    Canonical representative of a state.

    Applies the first transformation that changes the state and starts over,
    until the state is a fixed point of all of them. Translation and
    orientation are idempotent and every drop shrinks the bounding box, so
    the loop terminates. The empty pattern is its own representative.

    Args:
        state: The state to simplify.
        points: Interning table for the rebuilt points.

    Returns:
        The canonical state, equal for all states of the same class.
    """
    if state.last is None:
        return state

    while True:
        for transformation in TRANSFORMATIONS:
            transformed = transformation(state, points)
            if transformed != state:
                state = transformed
                break
        else:
            return state
