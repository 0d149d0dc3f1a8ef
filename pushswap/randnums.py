"""Generating lists of distinct random integers to feed the sorter."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

from pushswap.parsing import atoi_long

MAX_COUNT = 100000
MAGNITUDE = 100000


def generate(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` distinct integers with magnitude below 100000.

    Each value is negated with even odds. A non-positive ``size`` gives an
    empty list; more than 100000 values raises ValueError.
    """
    if size > MAX_COUNT:
        raise ValueError(f"cannot generate more than {MAX_COUNT} numbers")
    rng = rng if rng is not None else random.Random()
    seen: set[int] = set()
    values: list[int] = []
    while len(values) < size:
        num = rng.randrange(MAGNITUDE)
        if rng.randrange(10) % 2 == 0:
            num = -num
        if num not in seen:
            seen.add(num)
            values.append(num)
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Print the requested count of random integers separated by spaces."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: randnums COUNT\n")
        return 1
    try:
        values = generate(atoi_long(args[0]))
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.write(" ".join(str(value) for value in values))
    return 0


if __name__ == "__main__":
    sys.exit(main())