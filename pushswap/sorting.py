"""Sorting strategies that drive two stacks with the push_swap moves."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pushswap.chunks import Chunk
from pushswap.stack import Stack


@dataclass(frozen=True)
class Position:
    """How far a value is from the top, and from which end to reach it.

    When ``from_top`` is true, ``steps`` rotations bring the value to the top.
    Otherwise ``steps + 1`` reverse rotations do.
    """

    steps: int
    from_top: bool


def best_position(stack_size: int, index: int | None) -> Position | None:
    """Return the cheaper way to reach ``index``, or None if there is nothing."""
    if index is None or stack_size == 0:
        return None
    if index > stack_size // 2:
        return Position(stack_size - index - 1, False)
    return Position(index, True)


def search_element(
    stack: Stack, chunk: Chunk, prefer: Callable[[int, int], bool]
) -> Position | None:
    """Find the value in ``chunk`` that ``prefer`` ranks first.

    ``prefer(a, b)`` is true when ``a`` should replace the current best ``b``.
    """
    best: int | None = None
    index: int | None = None
    size = 0
    for i, value in enumerate(stack):
        size = i + 1
        if value in chunk and (best is None or prefer(value, best)):
            best = value
            index = i
    return best_position(size, index)


def sort_two(stack: Stack) -> None:
    """Sort a two-value stack."""
    if stack.top() > stack.bottom():
        stack.swap()


def sort_three(stack: Stack) -> None:
    """Sort a three-value stack in at most two moves."""
    for _ in range(2):
        top, middle, *_rest = stack
        bottom = stack.bottom()
        if top > bottom:
            stack.rotate()
        elif top > middle:
            stack.swap()
        elif middle > bottom:
            stack.reverse_rotate()


def smallest_position(stack: Stack) -> int:
    """Return the distance from the top of the smallest value."""
    values = list(stack)
    if not values:
        raise ValueError(f"stack {stack.name} is empty")
    return values.index(min(values))


def move_smallest(source: Stack, target: Stack) -> None:
    """Bring the smallest value of ``source`` to its top and push it to ``target``."""
    size = len(source)
    index = smallest_position(source)
    if index * 2 <= size:
        source.rotate_many(index)
    else:
        source.reverse_rotate_many(size - index)
    source.push_to(target)


def sort_five(stack_a: Stack, stack_b: Stack) -> None:
    """Sort a stack of four or five values using ``stack_b`` as scratch."""
    while len(stack_a) > 3:
        move_smallest(stack_a, stack_b)
    sort_three(stack_a)
    while len(stack_b) > 0:
        stack_b.push_to(stack_a)


def move_a_to_b(stack_a: Stack, stack_b: Stack, inner: Chunk, outer: Chunk) -> bool:
    """Push the topmost value of either chunk from ``stack_a`` to ``stack_b``.

    Values of ``inner`` are then rotated to the bottom of ``stack_b``.
    Returns False when ``stack_a`` holds no value of either chunk.
    """
    for i, value in enumerate(stack_a):
        if value in inner or value in outer:
            stack_a.rotate_many(i)
            stack_a.push_to(stack_b)
            if value in inner:
                stack_b.rotate()
            return True
    return False


def _bring_back(stack_a: Stack, stack_b: Stack, position: Position, largest: bool) -> None:
    if position.from_top:
        stack_b.rotate_many(position.steps)
    else:
        stack_b.reverse_rotate_many(position.steps + 1)
    stack_b.push_to(stack_a)
    if not largest:
        stack_a.rotate()


def move_b_to_a(stack_a: Stack, stack_b: Stack, chunk: Chunk) -> bool:
    """Move the cheaper of the largest or smallest ``chunk`` value back to ``stack_a``.

    The largest goes on top, the smallest to the bottom. Returns False when
    ``stack_b`` holds no value of ``chunk``.
    """
    largest = search_element(stack_b, chunk, operator.gt)
    smallest = search_element(stack_b, chunk, operator.lt)
    if largest is None or smallest is None:
        return False
    if largest.steps <= smallest.steps:
        _bring_back(stack_a, stack_b, largest, True)
    else:
        _bring_back(stack_a, stack_b, smallest, False)
    return True


def rewind(stack: Stack, chunk: Chunk) -> None:
    """Reverse-rotate until the chunk's lowest value is on top."""
    if chunk.low not in list(stack):
        raise ValueError(f"{chunk.low} is not in stack {stack.name}")
    while stack.top() != chunk.low:
        stack.reverse_rotate()


def sort_big(stack_a: Stack, stack_b: Stack, chunks: Sequence[Chunk]) -> None:
    """Sort ``stack_a`` by chunks, working outwards from the middle ones."""
    count = len(chunks)
    outer = count // 2
    inner = outer - 1
    while outer < count:
        while move_a_to_b(stack_a, stack_b, chunks[inner], chunks[outer]):
            pass
        inner -= 1
        outer += 1
    for chunk in reversed(chunks):
        while move_b_to_a(stack_a, stack_b, chunk):
            pass
        rewind(stack_a, chunk)