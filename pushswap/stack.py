"""A named stack of integers supporting the push_swap moves."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Stack:
    """A stack whose first iterated value is the top.

    Every move that changes the stack can be appended to a shared log
    as its instruction name ("sa", "rb", "rra", "pb", ...).
    """

    def __init__(
        self,
        name: str = "a",
        values: Iterable[int] = (),
        log: list[str] | None = None,
    ) -> None:
        self.name = name
        self._items: deque[int] = deque(values)
        self.log: list[str] = [] if log is None else log

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    def top(self) -> int:
        """Return the value on top of the stack."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items[0]

    def bottom(self) -> int:
        """Return the value at the bottom of the stack."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items[-1]

    def _record(self, move: str, name: str, record: bool) -> None:
        if record:
            self.log.append(f"{move}{name}")

    def swap(self, record: bool = True) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        self._record("s", self.name, record)

    def rotate(self, record: bool = True) -> None:
        """Move the top value to the bottom."""
        if len(self._items) < 2:
            return
        self._items.rotate(-1)
        self._record("r", self.name, record)

    def reverse_rotate(self, record: bool = True) -> None:
        """Move the bottom value to the top."""
        if len(self._items) < 2:
            return
        self._items.rotate(1)
        self._record("rr", self.name, record)

    def push_to(self, other: Stack, record: bool = True) -> None:
        """Move the top value onto the top of ``other``."""
        if not self._items:
            return
        other._items.appendleft(self._items.popleft())
        self._record("p", other.name, record)

    def rotate_many(self, n: int, record: bool = True) -> None:
        """Rotate ``n`` times; a non-positive ``n`` does nothing."""
        for _ in range(max(n, 0)):
            self.rotate(record)

    def reverse_rotate_many(self, n: int, record: bool = True) -> None:
        """Reverse-rotate ``n`` times; a non-positive ``n`` does nothing."""
        for _ in range(max(n, 0)):
            self.reverse_rotate(record)