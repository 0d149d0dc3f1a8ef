import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    InputError,
    atoi_long,
    has_duplicates,
    is_numeric,
    is_sorted,
    parse_args,
    to_int,
)

int32 = st.integers(min_value=-2147483648, max_value=2147483647)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", True),
        ("-42", True),
        ("+7", True),
        ("-", False),
        ("+", False),
        ("", False),
        ("4-2", False),
        (" 1", False),
        ("1a", False),
        ("--1", False),
    ],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (" \t-12abc", -12),
        ("+5", 5),
        ("abc", 0),
        ("\n\r\v\f 99", 99),
        ("-", 0),
    ],
)
def test_atoi_long(text, expected):
    assert atoi_long(text) == expected


def test_to_int_limits():
    assert to_int("2147483647") == 2147483647
    assert to_int("-2147483648") == -2147483648


def test_to_int_eleven_characters_accepted():
    assert to_int("00000000001") == 1


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483649", "000000000001", "abc", "", "+"]
)
def test_to_int_rejects(text):
    with pytest.raises(InputError):
        to_int(text)


def test_parse_single_argument_is_split():
    assert parse_args(["1 2  3"]) == [1, 2, 3]


def test_parse_several_arguments():
    assert parse_args(["1", "-2", "+3"]) == [1, -2, 3]


def test_parse_no_arguments():
    assert parse_args([]) == []


@pytest.mark.parametrize(
    "args", [["1 2", "3"], ["   "], [""], ["1", ""], ["1", "x"], ["9999999999"]]
)
def test_parse_rejects(args):
    with pytest.raises(InputError):
        parse_args(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["oops"])


@given(st.lists(int32, min_size=1, max_size=30))
def test_parse_round_trip_joined(values):
    assert parse_args([" ".join(map(str, values))]) == values


@given(st.lists(int32, min_size=2, max_size=30))
def test_parse_round_trip_separate(values):
    assert parse_args([str(v) for v in values]) == values


def test_has_duplicates():
    assert has_duplicates([3, 1, 3]) is True
    assert has_duplicates([3, 1, 2]) is False
    assert has_duplicates([]) is False


def test_is_sorted():
    assert is_sorted([1, 2, 2, 5]) is True
    assert is_sorted([2, 1]) is False
    assert is_sorted([]) is True


@given(st.lists(int32, max_size=30))
def test_sorted_list_is_sorted(values):
    assert is_sorted(sorted(values)) is True