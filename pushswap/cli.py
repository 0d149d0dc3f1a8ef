"""Command that prints the moves sorting the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.chunks import get_chunks
from pushswap.parsing import InputError, has_duplicates, is_sorted, parse_args
from pushswap.sorting import sort_big, sort_five, sort_three, sort_two
from pushswap.stack import Stack


def sort_moves(values: Sequence[int], sorted_values: Sequence[int]) -> list[str]:
    """Return the moves that sort ``values``, the first value being the top."""
    log: list[str] = []
    stack_a = Stack("a", values, log)
    stack_b = Stack("b", (), log)
    size = len(values)
    if size == 2:
        sort_two(stack_a)
    elif size == 3:
        sort_three(stack_a)
    elif 3 < size <= 5:
        sort_five(stack_a, stack_b)
    elif size > 5:
        sort_big(stack_a, stack_b, get_chunks(sorted_values))
    return log


def solve(values: Sequence[int]) -> list[str]:
    """Return the moves sorting ``values``; raise InputError on duplicates."""
    if has_duplicates(values):
        raise InputError("duplicate numbers")
    if is_sorted(values):
        return []
    return sort_moves(values, sorted(values))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line, or "Error" on standard error for bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        moves = solve(parse_args(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for move in moves:
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())