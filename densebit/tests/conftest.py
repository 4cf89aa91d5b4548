from __future__ import annotations

import random

import pytest

from densebit.bitset import BitSet


def check_invariants(s: BitSet) -> None:
    storage = s.storage
    data = storage.data
    length = storage.length
    assert length <= storage.capacity, f"length {length} > {storage.capacity}"
    if length:
        assert data[length - 1], f"data[{length - 1}] == 0 in {storage!r}"
    assert not any(data[length:]), f"nonzero word past length in {list(data)}"


def random_elements(rng: random.Random, *, size: int, limit: int) -> list[int]:
    return [rng.randrange(-2, limit) for _ in range(size)]


@pytest.fixture  # type: ignore[misc]
def rng() -> random.Random:
    return random.Random(0xACE1)


@pytest.fixture  # type: ignore[misc]
def a() -> BitSet:
    return BitSet().add_range(0, 100)


@pytest.fixture  # type: ignore[misc]
def b() -> BitSet:
    return BitSet([0, 200]).add_range(50, 150)
