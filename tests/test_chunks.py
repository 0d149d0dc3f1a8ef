import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.chunks import Chunk, chunk_count, get_chunks


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, 0),
        (5, 0),
        (6, 2),
        (49, 2),
        (50, 6),
        (249, 6),
        (250, 16),
        (1999, 16),
        (2000, 100),
    ],
)
def test_chunk_count_thresholds(size, expected):
    assert chunk_count(size) == expected


def test_chunk_contains_is_inclusive():
    chunk = Chunk(2, 5)
    assert 2 in chunk
    assert 5 in chunk
    assert 1 not in chunk
    assert 6 not in chunk


def test_get_chunks_splits_evenly():
    values = list(range(10))
    assert get_chunks(values) == [Chunk(0, 4), Chunk(5, 9)]


def test_last_chunk_takes_remainder():
    values = list(range(11))
    chunks = get_chunks(values)
    assert chunks[0] == Chunk(0, 4)
    assert chunks[-1] == Chunk(5, 10)


def test_too_few_values_raises():
    with pytest.raises(ValueError):
        get_chunks([1, 2, 3])


@given(
    st.lists(
        st.integers(min_value=-10**6, max_value=10**6),
        min_size=6,
        max_size=400,
        unique=True,
    )
)
def test_chunks_cover_every_value_once(values):
    ordered = sorted(values)
    chunks = get_chunks(ordered)
    assert len(chunks) == chunk_count(len(ordered))
    assert chunks[0].low == ordered[0]
    assert chunks[-1].high == ordered[-1]
    for value in ordered:
        assert sum(value in chunk for chunk in chunks) == 1