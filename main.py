"""
Count unlock patterns from the command line.

Usage:
    python main.py                  # 3x3 grid, at least 4 points
    python main.py 4 4              # 4x4 grid, at least 4 points
    python main.py 3 1 --by-length  # per-length breakdown
"""

import argparse
import logging
import sys
import time
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from constants import DEFAULT_GRID_SIZE, DEFAULT_MIN_LENGTH
from localtypes import Count
from patterns import count_by_length, count_patterns_naive, count_valid_patterns

logger = logging.getLogger(__name__)


def timed_count(size: int, min_length: int, naive: bool = False) -> tuple[Count, float]:
    """Returns the number of patterns and the duration of the count in milliseconds."""
    count_patterns = count_patterns_naive if naive else count_valid_patterns
    start = time.perf_counter()
    count = count_patterns(size, min_length)
    return count, (time.perf_counter() - start) * 1000


def length_table(size: int) -> Table:
    table = Table(title=f"Patterns on a {size}x{size} grid")
    table.add_column("Length", justify="right")
    table.add_column("Patterns", justify="right")
    counts = count_by_length(size)
    for length, count in enumerate(counts):
        table.add_row(str(length), str(int(count)))
    table.add_row("Total", str(int(counts.sum())), style="bold")
    return table


def non_negative(value: str) -> int:
    size = int(value)
    if size < 0:
        raise argparse.ArgumentTypeError(f"grid size must be non-negative, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count unlock patterns on a square grid")
    parser.add_argument(
        "size", nargs="?", type=non_negative, default=DEFAULT_GRID_SIZE, help="Grid width and height"
    )
    parser.add_argument(
        "min_length",
        nargs="?",
        type=int,
        default=DEFAULT_MIN_LENGTH,
        help="Minimal number of points of a pattern",
    )
    parser.add_argument(
        "--naive", action="store_true", help="Use the unmemoized tree search"
    )
    parser.add_argument(
        "--by-length", action="store_true", help="Print the number of patterns per length"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    logger.debug(f"Counting {args.size}x{args.size} patterns of at least {args.min_length} points")

    count, duration = timed_count(args.size, args.min_length, naive=args.naive)
    print(f"{count} ({duration:.0f} ms)")

    if args.by_length:
        Console().print(length_table(args.size))
    return 0


if __name__ == "__main__":
    sys.exit(main())
