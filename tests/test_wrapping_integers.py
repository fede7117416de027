import pytest
from hypothesis import given, strategies as st

from tcpkit.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


def test_compare_low_adjacent():
    assert (Wrap32(3) != Wrap32(1)) is True
    assert (Wrap32(3) == Wrap32(1)) is False


@given(st.integers(0, UINT32_MAX), st.integers(0, 255))
def test_compare_random(n, diff):
    m = (n + diff) & UINT32_MAX
    assert (Wrap32(n) == Wrap32(m)) == (n == m)
    assert (Wrap32(n) != Wrap32(m)) == (n != m)


@pytest.mark.parametrize(
    "n, zero, expected",
    [
        (3 * (1 << 32), 0, 0),
        (3 * (1 << 32) + 17, 15, 32),
        (7 * (1 << 32) - 2, 15, 13),
    ],
)
def test_wrap(n, zero, expected):
    assert Wrap32.wrap(n, Wrap32(zero)) == Wrap32(expected)


@pytest.mark.parametrize(
    "raw, zero, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
    ],
)
def test_unwrap(raw, zero, checkpoint, expected):
    assert Wrap32(raw).unwrap(Wrap32(zero), checkpoint) == expected


@pytest.mark.parametrize(
    "value, lo, hi",
    [
        (0, 0, 100000),
        (1, 0, 100000),
        (UINT32_MAX - 1, UINT32_MAX - 100000, UINT32_MAX + 100000),
        (UINT32_MAX, UINT32_MAX - 100000, UINT32_MAX + 100000),
        (UINT32_MAX + 1, UINT32_MAX - 100000, UINT32_MAX + 100000),
        (UINT32_MAX + 2, UINT32_MAX - 100000, UINT32_MAX + 100000),
        (2 * UINT32_MAX - 1, 2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000),
        (2 * UINT32_MAX, 2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000),
        (2 * UINT32_MAX + 1, 2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000),
        (2 * UINT32_MAX + 2, 2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000),
    ],
)
def test_unwrap_near_checkpoints(value, lo, hi):
    zero = Wrap32(19)
    wrapped = Wrap32.wrap(value, zero)
    checkpoints = list(range(lo, hi, 97)) + [lo, hi - 1]
    for checkpoint in checkpoints:
        assert wrapped.unwrap(zero, checkpoint) == value


@pytest.mark.parametrize("checkpoint", [UINT32_MAX, 2 * UINT32_MAX])
def test_unwrap_values_around_checkpoint(checkpoint):
    zero = Wrap32(19)
    offsets = list(range(-100000, 100000, 89)) + [-100000, 99999]
    for i in offsets:
        assert Wrap32.wrap(checkpoint + i, zero).unwrap(zero, checkpoint) == checkpoint + i


@given(
    st.integers(0, UINT32_MAX),
    st.integers((1 << 31) - 1, 1 << 63),
    st.integers(0, (1 << 31) - 1),
)
def test_roundtrip(isn_raw, val, offset):
    isn = Wrap32(isn_raw)
    big_offset = (1 << 31) - 1
    for value in (
        val,
        val + 1,
        val - 1,
        val + offset,
        val - offset,
        val + big_offset,
        val - big_offset,
    ):
        assert Wrap32.wrap(value, isn).unwrap(isn, val) == value


def test_add_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(5) + 10 == Wrap32(15)


def test_constructor_truncates_to_32_bits():
    assert Wrap32(1 << 32) == Wrap32(0)
    assert Wrap32(-1).raw_value == UINT32_MAX


def test_hashable_and_equal():
    assert {Wrap32(7), Wrap32(7 + (1 << 32))} == {Wrap32(7)}