import pytest
from hypothesis import given
from hypothesis import strategies as st

from numdiffer.bitvector import BitVector


@given(st.integers(min_value=1, max_value=500))
def test_size_is_whole_bytes_covering_request(n):
    bv = BitVector(n)
    assert len(bv) % 8 == 0
    assert n <= len(bv) < n + 8


def test_zero_size_is_empty():
    bv = BitVector(0)
    assert len(bv) == 0
    assert bv.to_string() == ""


@given(st.integers(min_value=1, max_value=200))
def test_new_vector_is_all_zero(n):
    bv = BitVector(n)
    assert bv.get_range(0, len(bv)) == [0] * len(bv)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BitVector(-1)


@given(st.integers(min_value=0, max_value=300))
def test_set_grows_and_round_trips(pos):
    bv = BitVector(0)
    bv.set(pos, 1)
    assert len(bv) > pos
    assert bv.get(pos) == 1
    assert sum(bv.get_range(0, len(bv))) == 1
    bv.set(pos, 0)
    assert bv.get(pos) == 0


def test_get_out_of_range_raises():
    bv = BitVector(8)
    with pytest.raises(IndexError):
        bv.get(len(bv))


def test_get_negative_raises():
    with pytest.raises(ValueError):
        BitVector(8).get(-1)


def test_get_range_pads_with_none():
    bv = BitVector(8)
    bv.set(5, 1)
    result = bv.get_range(4, 12)
    assert len(result) == 8
    assert result[:4] == [0, 1, 0, 0]
    assert result[4:] == [None] * 4


def test_get_range_empty_cases():
    bv = BitVector(8)
    assert bv.get_range(3, 3) == []
    assert bv.get_range(5, 2) == []
    assert bv.get_range(len(bv), len(bv) + 4) == []


@given(st.integers(min_value=0, max_value=40), st.lists(st.integers(0, 1), max_size=60))
def test_set_range_round_trip(start, values):
    bv = BitVector(0)
    bv.set_range(start, start + len(values), values)
    if values:
        assert bv.get_range(start, start + len(values)) == values
        assert sum(bv.get_range(0, start)) == 0 if start else True
    else:
        assert len(bv) == 0


def test_set_range_short_values_raises():
    bv = BitVector(8)
    with pytest.raises(ValueError):
        bv.set_range(0, 4, [1, 0])


@given(st.integers(min_value=0, max_value=40), st.integers(min_value=1, max_value=40))
def test_set_range_to_sets_exactly_the_range(start, count):
    bv = BitVector(0)
    end = start + count
    bv.set_range_to(start, end, 1)
    bits = bv.get_range(0, len(bv))
    assert bits[start:end] == [1] * count
    assert sum(bits) == count
    bv.set_range_to(start, end, 0)
    assert sum(bv.get_range(0, len(bv))) == 0


@given(st.lists(st.integers(0, 1), min_size=1, max_size=64),
       st.integers(min_value=0, max_value=70),
       st.integers(min_value=0, max_value=80))
def test_flip_range_twice_is_identity(values, start, end):
    bv = BitVector(0)
    bv.set_range(0, len(values), values)
    before = bv.to_string()
    n1 = bv.flip_range(start, end)
    n2 = bv.flip_range(start, end)
    assert n1 == n2 == max(0, min(end, len(bv)) - start)
    assert bv.to_string() == before


def test_flip_range_inverts_bits():
    bv = BitVector(16)
    bv.set(3, 1)
    count = bv.flip_range(2, 5)
    assert count == 3
    assert bv.get_range(2, 5) == [1, 0, 1]


def test_flip_on_empty_returns_zero():
    assert BitVector(0).flip_range(0, 10) == 0


def test_to_string_highest_bit_first():
    bv = BitVector(8)
    bv.set(0, 1)
    assert bv.to_string() == "00000001"
    assert str(bv) == bv.to_string()


@given(st.lists(st.integers(0, 1), min_size=1, max_size=64))
def test_to_string_matches_bits_reversed(values):
    bv = BitVector(0)
    bv.set_range(0, len(values), values)
    text = bv.to_string()
    assert len(text) == len(bv)
    assert [int(c) for c in reversed(text)] == bv.get_range(0, len(bv))


def test_clear_empties_vector():
    bv = BitVector(24)
    bv.set(10, 1)
    bv.clear()
    assert len(bv) == 0
    with pytest.raises(IndexError):
        bv.get(0)