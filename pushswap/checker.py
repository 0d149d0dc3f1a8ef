"""Command that checks whether a list of moves sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from pushswap.parsing import InputError, has_duplicates, parse_args
from pushswap.stack import Stack

MOVES = frozenset(
    {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
)


class InvalidMoveError(ValueError):
    """Raised when a line of input is not a known move."""


def is_valid_move(line: str) -> bool:
    """Return True if ``line`` is exactly a known move followed by a newline."""
    return line.endswith("\n") and line[:-1] in MOVES


def read_moves(stream: TextIO) -> list[str]:
    """Read one move per line from ``stream`` and return the move names.

    Every line, the last one included, must end with a newline.
    """
    moves: list[str] = []
    for line in stream:
        if not is_valid_move(line):
            raise InvalidMoveError(f"invalid move: {line!r}")
        moves.append(line[:-1])
    return moves


def apply_move(stack_a: Stack, stack_b: Stack, move: str) -> None:
    """Perform ``move`` on the two stacks without recording it."""
    if move not in MOVES:
        raise InvalidMoveError(f"invalid move: {move!r}")
    if move in ("ra", "rr"):
        stack_a.rotate(False)
    if move in ("rb", "rr"):
        stack_b.rotate(False)
    if move in ("rra", "rrr"):
        stack_a.reverse_rotate(False)
    if move in ("rrb", "rrr"):
        stack_b.reverse_rotate(False)
    if move in ("sa", "ss"):
        stack_a.swap(False)
    if move in ("sb", "ss"):
        stack_b.swap(False)
    if move == "pa":
        stack_b.push_to(stack_a, False)
    if move == "pb":
        stack_a.push_to(stack_b, False)


def apply_moves(stack_a: Stack, stack_b: Stack, moves: Iterable[str]) -> None:
    """Perform every move of ``moves`` in order."""
    for move in moves:
        apply_move(stack_a, stack_b, move)


def is_sorted_state(stack_a: Stack, stack_b: Stack) -> bool:
    """Return True if ``stack_b`` is empty and ``stack_a`` ascends from the top."""
    if len(stack_b):
        return False
    values = list(stack_a)
    return all(a <= b for a, b in zip(values, values[1:]))


def check(values: Sequence[int], moves: Iterable[str]) -> bool:
    """Return True if ``moves`` sort ``values``, the first value being the top."""
    stack_a = Stack("a", values)
    stack_b = Stack("b")
    apply_moves(stack_a, stack_b, moves)
    return is_sorted_state(stack_a, stack_b)


def main(argv: Sequence[str] | None = None) -> int:
    """Read moves from standard input and print OK, KO or Error."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_args(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if not values:
        return 0
    if has_duplicates(values):
        sys.stderr.write("Error\n")
        return 0
    try:
        moves = read_moves(sys.stdin)
    except InvalidMoveError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if check(values, moves) else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())