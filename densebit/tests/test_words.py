import pytest

from densebit.words import (
    BIT_POSITIONS,
    BITS_PER_WORD,
    MAX_INT,
    MAX_UINT,
    MIN_INT,
    bit_length,
    count,
    leading_zeros,
    new_capacity,
    next_pow2,
    trailing_zeros,
    word_mask,
)


def test_constants() -> None:
    assert BITS_PER_WORD == 64
    assert MAX_UINT == (1 << 64) - 1
    assert MAX_INT == (1 << 63) - 1
    assert MIN_INT == -(1 << 63)


def test_bit_positions_is_a_permutation() -> None:
    assert sorted(BIT_POSITIONS) == list(range(BITS_PER_WORD))


@pytest.mark.parametrize("i", range(BITS_PER_WORD))
def test_word_with_one_bit(i: int) -> None:
    word = 1 << i
    assert leading_zeros(word) == 63 - i
    assert trailing_zeros(word) == i
    assert count(word) == 1
    assert bit_length(word) == i + 1


@pytest.mark.parametrize(
    ("word", "lead", "trail", "ones"),
    [
        (0x0, 64, 64, 0),
        (0xA, 60, 1, 2),
        (0xFFFFFFFFFFFFFFFF, 0, 0, 64),
        (0x7FFFFFFFFFFFFFFE, 1, 1, 62),
        (0x5555555555555555, 1, 0, 32),
        (0xAAAAAAAAAAAAAAAA, 0, 1, 32),
    ],
)
def test_word_funcs(word: int, lead: int, trail: int, ones: int) -> None:
    assert leading_zeros(word) == lead
    assert trailing_zeros(word) == trail
    assert count(word) == ones


@pytest.mark.parametrize(
    ("low", "high", "expected"),
    [
        (0, 0, 0x1),
        (0, 3, 0xF),
        (4, 7, 0xF0),
        (63, 63, 1 << 63),
        (1, 63, MAX_UINT - 1),
        (0, 63, MAX_UINT),
    ],
)
def test_word_mask(low: int, high: int, expected: int) -> None:
    assert word_mask(low, high) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (MIN_INT, 1),
        (-1, 1),
        (0, 1),
        (1, 2),
        (2, 4),
        (3, 4),
        (4, 8),
        ((1 << 19) - 1, 1 << 19),
        (1 << 19, 1 << 20),
        (MAX_INT >> 1, (MAX_INT >> 1) + 1),
        ((MAX_INT >> 1) + 1, MAX_INT),
        (MAX_INT - 1, MAX_INT),
        (MAX_INT, MAX_INT),
    ],
)
def test_next_pow2(value: int, expected: int) -> None:
    assert next_pow2(value) == expected


@pytest.mark.parametrize(
    ("length", "capacity", "expected"),
    [(1, 0, 1), (2, 1, 2), (3, 2, 4), (5, 4, 8), (100, 4, 100)],
)
def test_new_capacity(length: int, capacity: int, expected: int) -> None:
    assert new_capacity(length, capacity) == expected
