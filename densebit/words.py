"""Constants and primitive operations on 64-bit words.

A word is a Python :class:`int` in the range ``[0, MAX_UINT]``. The
primitives here define the edge case values at zero that the rest of the
package relies on: :func:`leading_zeros` and :func:`trailing_zeros` both
return :data:`BITS_PER_WORD` when the word is zero.

"""

import sys
from typing import Sequence

BITS_PER_WORD = 64
SHIFT = 6
MASK = BITS_PER_WORD - 1

MAX_UINT = (1 << BITS_PER_WORD) - 1
MAX_WORD = MAX_UINT

MAX_INT = sys.maxsize
MIN_INT = -MAX_INT - 1

# A sequence, starting with 6 zeros, that contains every 6-bit pattern as a
# subsequence, i.e., a De Bruijn B(2, 6) sequence.
DE_BRUIJN = 0x022FDD63CC95386D


def _bit_positions(sequence: int) -> Sequence[int]:
    positions = [0] * BITS_PER_WORD
    for position in range(BITS_PER_WORD):
        positions[((sequence << position) & MAX_UINT) >> (BITS_PER_WORD - SHIFT)] = (
            position
        )
    return tuple(positions)


BIT_POSITIONS = _bit_positions(DE_BRUIJN)


def bit_length(word: int) -> int:
    """Return the index of the highest set bit of `word` plus one."""
    return word.bit_length()


def leading_zeros(word: int) -> int:
    """Return the number of leading zero bits in `word`."""
    return BITS_PER_WORD - word.bit_length()


def trailing_zeros(word: int) -> int:
    """Return the number of trailing zero bits in `word`.

    Uses the technique from "Using de Bruijn Sequences to Index a 1 in a
    Computer Word" (Leiserson, Prokop and Randall, 1998): ``word & -word``
    isolates the lowest set bit at position ``p``, so the product below is
    ``DE_BRUIJN << p`` and its top six bits identify ``p`` uniquely.

    """
    if not word:
        return BITS_PER_WORD
    product = ((word & -word) * DE_BRUIJN) & MAX_UINT
    return BIT_POSITIONS[product >> (BITS_PER_WORD - SHIFT)]


def count(word: int) -> int:
    """Return the number of set bits in `word`."""
    return word.bit_count()


def word_mask(low: int, high: int) -> int:
    """Return a word with bits `low` through `high` set, inclusive."""
    assert (
        0 <= low <= high < BITS_PER_WORD
    ), f"invalid mask bounds: low == {low}, high == {high}"
    return MAX_WORD >> (BITS_PER_WORD - 1 - (high - low)) << low


def next_pow2(value: int) -> int:
    """Return the smallest power of two strictly greater than `value`.

    Values less than or equal to zero give 1. The result saturates at
    :data:`MAX_INT` instead of growing past it.

    Parameters
    ----------
    value
        The value whose next power of two to compute.

    """
    if value <= 0:
        return 1
    length = value.bit_length()
    if length < BITS_PER_WORD - 1:
        return 1 << length
    return MAX_INT


def new_capacity(length: int, capacity: int) -> int:
    """Suggest a capacity for growing a buffer of `capacity` to `length`.

    Favoring powers of two gives linear amortized cost for repeated growth.

    """
    return max(length, next_pow2(capacity))
