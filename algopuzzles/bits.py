"""Puzzles about binary representations and integer identities."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
# Bit 31 of a signed 32-bit word never takes part in the alternation check.
_SIGNED_MAGNITUDE_MASK = (1 << (_WORD_BITS - 1)) - 1


def has_alternating_bits(n: int) -> bool:
    """Return True if adjacent bits of ``n`` always differ, up to its highest set bit.

    ``n`` is read as a signed 32-bit word. Bit 31 is the sign bit and is not
    checked.
    """
    bits = n & _SIGNED_MAGNITUDE_MASK
    top = max(bits.bit_length() - 1, 0)
    return all(
        ((bits >> i) & 1) != ((bits >> (i - 1)) & 1) for i in range(1, top + 1)
    )


def hamming_distance(x: int, y: int) -> int:
    """Return the number of bit positions at which two 32-bit words differ."""
    return bin((x ^ y) & _WORD_MASK).count("1")


def hamming_weight(n: int) -> int:
    """Return the number of set bits in ``n`` read as an unsigned 32-bit word."""
    return bin(n & _WORD_MASK).count("1")


def reverse_bits(n: int) -> int:
    """Reverse the order of the bits of an unsigned 32-bit word."""
    return int(format(n & _WORD_MASK, f"0{_WORD_BITS}b")[::-1], 2)


def gray_code(n: int) -> list[int]:
    """Return the ``n``-bit reflected Gray code sequence, starting at 0."""
    return [i ^ (i >> 1) for i in range(1 << n)]


def is_power_of_three(n: int) -> bool:
    """Return True if ``n`` is a positive power of three (including 1)."""
    if n < 1:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def single_number(nums: Iterable[int]) -> int:
    """Return the one value that does not appear twice in ``nums``."""
    return reduce(xor, nums, 0)


def missing_number(nums: Iterable[int]) -> int:
    """Return the value of ``0..len(nums)`` that is missing from ``nums``."""
    values = list(nums)
    count = len(values)
    return count * (count + 1) // 2 - sum(values)