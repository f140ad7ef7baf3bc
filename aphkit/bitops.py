"""Bit counting helpers for fixed-width unsigned integers."""

from collections.abc import Iterator

__all__ = [
    "leading_zeroes",
    "trailing_zeroes",
    "trailing_ones",
    "iter_bits",
    "iter_bit_ranges",
]


def _check(x: int, width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if x < 0 or x >> width:
        raise ValueError(f"{x} does not fit in {width} unsigned bits")


def leading_zeroes(x: int, width: int = 32) -> int:
    """Number of zero bits above the highest set bit of a ``width``-bit value."""
    _check(x, width)
    return width - x.bit_length()


def trailing_zeroes(x: int, width: int = 32) -> int:
    """Number of zero bits below the lowest set bit; ``width`` when ``x`` is 0."""
    _check(x, width)
    if x == 0:
        return width
    return (x & -x).bit_length() - 1


def trailing_ones(x: int, width: int = 32) -> int:
    """Number of consecutive set bits starting from the least significant bit."""
    _check(x, width)
    mask = (1 << width) - 1
    return trailing_zeroes(~x & mask, width)


def _bits(value: int) -> Iterator[int]:
    while value:
        lowest = value & -value
        yield lowest.bit_length() - 1
        value ^= lowest


def iter_bits(value: int) -> Iterator[int]:
    """Yield the index of every set bit of ``value``, lowest first."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return _bits(value)


def _ranges(value: int, width: int) -> Iterator[tuple[int, int]]:
    if value == (1 << width) - 1:
        yield 0, width
        return
    offset = 0
    while value:
        zeros = trailing_zeroes(value, width)
        value >>= zeros
        offset += zeros
        ones = trailing_ones(value, width)
        yield offset, ones
        value >>= ones
        offset += ones


def iter_bit_ranges(value: int, width: int = 32) -> Iterator[tuple[int, int]]:
    """Yield ``(offset, count)`` for every run of consecutive set bits, lowest first."""
    _check(value, width)
    return _ranges(value, width)