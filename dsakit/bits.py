"""Bit manipulation helpers on integers."""

from __future__ import annotations


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("value must not be negative")


def get_ith_bit(n: int, i: int) -> int:
    """Bit i of n, as 0 or 1."""
    return (n >> i) & 1


def set_ith_bit(n: int, i: int) -> int:
    """n with bit i set."""
    return n | (1 << i)


def clear_ith_bit(n: int, i: int) -> int:
    """n with bit i cleared."""
    return n & ~(1 << i)


def update_ith_bit(n: int, i: int, v: int) -> int:
    """n with bit i cleared and then or-ed with v shifted to position i."""
    return clear_ith_bit(n, i) | (v << i)


def clear_last_i_bits(n: int, i: int) -> int:
    """n with its lowest i bits cleared."""
    return n & (~0 << i)


def clear_bits_in_range(n: int, i: int, j: int) -> int:
    """n with bits i through j, inclusive, cleared."""
    mask = (~0 << (j + 1)) | ((1 << i) - 1)
    return n & mask


def power_of_two(n: int) -> bool:
    """True if n has at most one set bit (so 0 counts as well)."""
    return (n & (n - 1)) == 0


def count_set_bits(n: int) -> int:
    """Number of set bits, checking the lowest bit and shifting."""
    _check_non_negative(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_bits(n: int) -> int:
    """Number of set bits, clearing the lowest set bit each step."""
    _check_non_negative(n)
    count = 0
    while n > 0:
        n &= n - 1
        count += 1
    return count


def dec_to_binary(n: int) -> int:
    """The binary digits of n read as a decimal number, e.g. 5 -> 101."""
    _check_non_negative(n)
    result = 0
    place = 1
    while n > 0:
        result += place * (n & 1)
        place *= 10
        n >>= 1
    return result