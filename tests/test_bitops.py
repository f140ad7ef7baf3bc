import pytest

from aphkit.bitops import (
    iter_bit_ranges,
    iter_bits,
    leading_zeroes,
    trailing_ones,
    trailing_zeroes,
)


def test_zero_counts_full_width():
    assert leading_zeroes(0, 32) == 32
    assert trailing_zeroes(0, 32) == 32
    assert trailing_ones(0, 32) == 0


def test_single_bit_positions():
    for bit in range(64):
        value = 1 << bit
        assert trailing_zeroes(value, 64) == bit
        assert leading_zeroes(value, 64) == 64 - 1 - bit


def test_trailing_ones_of_full_mask():
    assert trailing_ones((1 << 32) - 1, 32) == 32


def test_trailing_ones_stops_at_first_zero():
    run = 5
    value = ((1 << run) - 1) | (1 << (run + 3))
    assert trailing_ones(value, 16) == run


def test_default_width_is_32():
    assert leading_zeroes(1 << 31) == 0
    assert trailing_zeroes(0) == 32


@pytest.mark.parametrize("bad", [-1, 1 << 8])
def test_out_of_range_values_rejected(bad):
    with pytest.raises(ValueError):
        leading_zeroes(bad, 8)
    with pytest.raises(ValueError):
        trailing_zeroes(bad, 8)
    with pytest.raises(ValueError):
        trailing_ones(bad, 8)


def test_iter_bits_yields_set_bits_in_order():
    bits = [0, 3, 17, 40, 63]
    value = sum(1 << b for b in bits)
    assert list(iter_bits(value)) == bits


def test_iter_bits_of_zero_is_empty():
    assert list(iter_bits(0)) == []


def test_iter_bits_rejects_negative():
    with pytest.raises(ValueError):
        iter_bits(-4)


def test_iter_bit_ranges_recovers_runs():
    runs = [(1, 2), (5, 3), (20, 1), (24, 8)]
    value = sum(((1 << count) - 1) << offset for offset, count in runs)
    assert list(iter_bit_ranges(value, 32)) == runs


def test_iter_bit_ranges_full_mask():
    assert list(iter_bit_ranges((1 << 16) - 1, 16)) == [(0, 16)]


def test_iter_bit_ranges_empty():
    assert list(iter_bit_ranges(0, 32)) == []


def test_iter_bit_ranges_cover_exactly_the_set_bits():
    value = 0b1011_0111_0000_1101_1110_0001_0101_0110
    covered = set()
    for offset, count in iter_bit_ranges(value, 32):
        assert count > 0
        covered.update(range(offset, offset + count))
    assert covered == set(iter_bits(value))


def test_iter_bit_ranges_rejects_too_wide_value():
    with pytest.raises(ValueError):
        iter_bit_ranges(1 << 32, 32)