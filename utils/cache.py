"""
Memoization table.

A lookup table keyed by any hashable value, usually a tuple:
- get_or_compute(key, compute): stored value, or compute() stored on miss

Tuples compare element-wise, so heterogeneous keys such as
(PatternState, length, min_length) work without a dedicated key type.
Entries are never evicted; the table lives as long as its owner.
"""

import logging
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from constants import CACHE_REPORT_INTERVAL

logger = logging.getLogger(__name__)

Key = TypeVar("Key", bound=Hashable)
Value = TypeVar("Value")


class Cache(Generic[Key, Value]):
    """
    Append-only memoization table. Not thread-safe.

    Example:
        >>> squares = Cache[int, int]("squares")
        >>> squares.get_or_compute(3, lambda: 9)
        9
        >>> squares.get_or_compute(3, lambda: 0)
        9
        >>> len(squares)
        1
    """

    def __init__(self, name: str = "cache") -> None:
        self.name = name
        self._table: dict[Key, Value] = {}

    def get_or_compute(self, key: Key, compute: Callable[[], Value]) -> Value:
        """
        Return the value stored under key.

        On a miss, compute is called exactly once and its result is stored.
        """
        if key in self._table:
            return self._table[key]

        value = compute()
        self._table[key] = value
        if len(self._table) % CACHE_REPORT_INTERVAL == 0:
            logger.debug(f"{self.name}: {len(self._table)} entries")
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"Cache({self.name!r}, {len(self._table)} entries)"
