"""Splitting a sorted list of values into contiguous value ranges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """An inclusive range of values."""

    low: int
    high: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high


def chunk_count(size: int) -> int:
    """Return how many chunks to use for ``size`` values (0 for five or fewer)."""
    if size <= 5:
        return 0
    if size < 50:
        return 2
    if size < 250:
        return 6
    if size < 2000:
        return 16
    return 100


def get_chunks(sorted_values: Sequence[int]) -> list[Chunk]:
    """Split ascending ``sorted_values`` into equal-sized chunks.

    The last chunk absorbs any remainder so it always ends at the largest value.
    """
    size = len(sorted_values)
    count = chunk_count(size)
    if count == 0:
        raise ValueError(f"too few values to split into chunks: {size}")
    width = size // count
    chunks = [
        Chunk(sorted_values[i * width], sorted_values[(i + 1) * width - 1])
        for i in range(count)
    ]
    chunks[-1] = Chunk(chunks[-1].low, sorted_values[-1])
    return chunks