"""
Counting of unlock patterns on square grids.

A pattern is a sequence of distinct grid points, each move being a straight
segment that may only pass over points already visited.

**Points** (points.py)
    Interning table handing out one Point instance per coordinate.

**Geometry** (geometry.py)
    Line of sight: grid points strictly between two points.

**State** (state.py)
    Partial patterns as (last point, unused points), legality of a move.

**Canonical** (canonical.py)
    Symmetry reduction of states to a canonical representative.

**Counting** (counting.py)
    Memoized recursive counting over canonical states.

**Naive** (naive.py)
    Unmemoized depth-first reference counter.
"""

from .canonical import simplify
from .counting import (
    PatternCounter,
    PatternCountOverflow,
    count_by_length,
    count_valid_patterns,
)
from .geometry import LineOfSight, points_between
from .naive import count_patterns_naive
from .points import PointTable
from .state import (
    PatternState,
    append,
    empty_state,
    is_legal_successor,
    legal_successors,
)

__all__ = [
    # Points & geometry
    "PointTable",
    "LineOfSight",
    "points_between",
    # State
    "PatternState",
    "empty_state",
    "append",
    "is_legal_successor",
    "legal_successors",
    # Canonical
    "simplify",
    # Counting
    "PatternCounter",
    "PatternCountOverflow",
    "count_valid_patterns",
    "count_by_length",
    "count_patterns_naive",
]
