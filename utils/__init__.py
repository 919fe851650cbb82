"""
Generic helpers with no pattern-specific dependencies.

Modules:
    cache   - Memoization table keyed by hashable tuples
"""
