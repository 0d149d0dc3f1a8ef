"""Reading and validating the integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_DIGITS_LENGTH = 11

_NUMERIC = re.compile(r"[+-]?[0-9]+")
_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


class InputError(ValueError):
    """Raised when the arguments are not a valid list of integers."""


def is_numeric(text: str) -> bool:
    """Return True for an optional sign followed by one or more ASCII digits."""
    return _NUMERIC.fullmatch(text) is not None


def atoi_long(text: str) -> int:
    """Read the leading integer of ``text`` the way ``atoi`` does.

    Leading whitespace is skipped, one sign is accepted, and reading stops
    at the first non-digit. Text with no digits reads as 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups() if match else ("", "")
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def to_int(text: str) -> int:
    """Convert ``text`` to a 32-bit signed integer or raise InputError."""
    if not is_numeric(text):
        raise InputError(f"not a number: {text!r}")
    if len(text) > MAX_DIGITS_LENGTH:
        raise InputError(f"number too long: {text!r}")
    value = atoi_long(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"number out of range: {text!r}")
    return value


def parse_args(args: Sequence[str]) -> list[int]:
    """Parse the program arguments (without the program name) into integers.

    A single argument is split on spaces; several arguments are each one
    number. No arguments give an empty list. Anything else invalid,
    including a single argument holding no numbers, raises InputError.
    """
    if not args:
        return []
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
        if not words:
            raise InputError("no numbers given")
    else:
        words = list(args)
    return [to_int(word) for word in words]


def has_duplicates(values: Sequence[int]) -> bool:
    """Return True if any value appears more than once."""
    return len(set(values)) != len(values)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))