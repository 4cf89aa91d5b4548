"""densebit user-facing helpers built on :class:`~densebit.bitset.BitSet`."""

from __future__ import annotations

import math

from public import public

from .bitset import BitSet


@public  # type: ignore[misc]
def union(*sets: BitSet) -> BitSet:
    """Return the union of `sets`.

    The result is allocated once, large enough to hold the largest element of
    any input, and each input is then folded into it in place.

    """
    maximum = max((s.max() for s in sets if s), default=-1)

    # a negative maximum gives an empty set
    result = BitSet((maximum,))
    for s in sets:
        result.set_or(result, s)
    return result


@public  # type: ignore[misc]
def intersection(*sets: BitSet) -> BitSet:
    """Return the intersection of `sets`, or an empty set if none are given."""
    if not sets:
        return BitSet()
    first, *rest = sets
    result = first.copy()
    for s in rest:
        if not result:
            break
        result.set_and(result, s)
    return result


@public  # type: ignore[misc]
def primes(n: int) -> BitSet:
    """Return the prime numbers less than `n`.

    Parameters
    ----------
    n
        The exclusive upper bound of the primes to compute.

    """
    sieve = BitSet().add_range(2, n)
    limit = math.isqrt(max(n, 0))
    p = sieve.next(1)
    while p != -1 and p <= limit:
        for k in range(p * p, n, p):
            sieve.discard(k)
        p = sieve.next(p)
    return sieve
