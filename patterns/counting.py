"""
Memoized counting of unlock patterns.

The number of completions of a partial pattern only depends on its
canonical state, so the recursion caches one count per
(canonical state, length, minimal length) and never enumerates two
symmetric sub-patterns twice.
"""

import logging

import numpy as np

from constants import INT64_MAX
from localtypes import Count
from utils.cache import Cache

from .canonical import simplify
from .geometry import LineOfSight
from .points import PointTable
from .state import PatternState, empty_state, legal_successors

logger = logging.getLogger(__name__)


class PatternCountOverflow(OverflowError):
    """Raised when a pattern count exceeds the signed 64-bit range."""

    pass


class PatternCounter:
    """
    Counting context for one grid.

    Owns the point table, the line of sight cache and the count cache, so
    independent counters share no state.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Grid size must be non-negative, got {size}")
        self.size = size
        self.points = PointTable()
        self.line_of_sight = LineOfSight(self.points.at)
        self._counts: Cache[tuple[PatternState, int, int], Count] = Cache("counts")

    def count_completions(self, state: PatternState, length: int, min_length: int) -> Count:
        """
        Counts the patterns starting with state that have at least min_length points.

        Args:
            state: The partial pattern, already `length` points long.
            length: Number of points drawn in state.
            min_length: Minimal number of points of a counted pattern.

        Returns:
            Number of patterns, state itself included, extending state.

        Raises:
            PatternCountOverflow: If the count does not fit in a signed 64-bit integer.
        """
        canonical = simplify(state, self.points)

        def compute() -> Count:
            total = 1 if length >= min_length else 0
            for successor in legal_successors(canonical, self.line_of_sight):
                total += self.count_completions(successor, length + 1, min_length)
                if total > INT64_MAX:
                    raise PatternCountOverflow(
                        f"Pattern count exceeds {INT64_MAX} for {canonical}"
                    )
            return total

        return self._counts.get_or_compute((canonical, length, min_length), compute)

    def count_valid_patterns(self, min_length: int) -> Count:
        count = self.count_completions(empty_state(self.size, self.points), 0, min_length)
        logger.debug(
            f"{self.size}x{self.size}, min length {min_length}: {count} patterns, "
            f"{len(self._counts)} cached states"
        )
        return count

    def __len__(self) -> int:
        return len(self._counts)


def count_valid_patterns(size: int, min_length: int) -> Count:
    """Number of valid patterns of at least min_length points on a (size x size) grid."""
    return PatternCounter(size).count_valid_patterns(min_length)


def count_by_length(size: int) -> np.ndarray:
    """
    Number of valid patterns of each exact length.

    Index k of the result holds the number of patterns made of exactly k
    points, from the empty pattern (k = 0) to the full grid (k = size**2).
    """
    counter = PatternCounter(size)
    at_least = np.array(
        [counter.count_valid_patterns(k) for k in range(size * size + 2)],
        dtype=np.int64,
    )
    return -np.diff(at_least)
