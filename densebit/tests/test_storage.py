from array import array

import pytest

from densebit.storage import WordArray


@pytest.fixture  # type: ignore[misc]
def words() -> WordArray:
    result = WordArray(3)
    result.data[:] = array("Q", [1, 2, 3])
    return result


def test_construction() -> None:
    storage = WordArray()
    assert len(storage) == 0
    assert storage.capacity == 0

    storage = WordArray(4)
    assert len(storage) == 4
    assert storage.capacity == 4
    assert list(storage.words()) == [0, 0, 0, 0]


def test_repr(words: WordArray) -> None:
    assert repr(words) == "WordArray([0x1, 0x2, 0x3], capacity=3)"


def test_realloc_shrink_zeroes_tail(words: WordArray) -> None:
    assert not words.realloc(1)
    assert len(words) == 1
    assert list(words.data) == [1, 0, 0]


def test_realloc_grow_discards(words: WordArray) -> None:
    assert words.realloc(5)
    assert len(words) == 5
    assert words.capacity == 5
    assert not any(words.data)


def test_set_length_grow_keeps_words(words: WordArray) -> None:
    words.set_length(5)
    assert list(words.words()) == [1, 2, 3, 0, 0]


def test_set_length_shrink_then_grow(words: WordArray) -> None:
    words.set_length(1)
    words.set_length(3)
    assert list(words.words()) == [1, 0, 0]
    assert words.capacity == 3


def test_ensure_length(words: WordArray) -> None:
    words.ensure_length(2)
    assert len(words) == 3

    words.ensure_length(4)
    assert list(words.words()) == [1, 2, 3, 0]


def test_trim() -> None:
    storage = WordArray(4)
    storage.data[0] = 7
    storage.trim()
    assert len(storage) == 1

    storage.data[0] = 0
    storage.trim()
    assert len(storage) == 0
    assert storage.capacity == 4


def test_growth_doubles() -> None:
    storage = WordArray()
    capacities = []
    for length in range(1, 10):
        storage.ensure_length(length)
        capacities.append(storage.capacity)
    assert capacities == [1, 2, 4, 4, 8, 8, 8, 8, 16]
