"""An efficiently stored, mutable set of non-negative integers.

A :class:`BitSet` packs its members into 64-bit words: word ``i`` holds the
integers ``[64 * i, 64 * (i + 1))`` and bit ``b`` of word ``i`` is set if and
only if ``64 * i + b`` is a member. A set occupies roughly ``n`` bits, where
``n`` is the largest value it has stored.

The binary operations come in two flavors. The pure ones
(:meth:`BitSet.intersection`, :meth:`BitSet.union`,
:meth:`BitSet.symmetric_difference` and :meth:`BitSet.difference`) return a
new set. The in-place ones (:meth:`BitSet.set_and`, :meth:`BitSet.set_or`,
:meth:`BitSet.set_xor` and :meth:`BitSet.set_and_not`) write their result
into the set they are called on, which is allowed to be one of the operands::

   >>> s = BitSet([1, 2])
   >>> s.set_or(s, BitSet([5]))
   BitSet({1, 2, 5})

"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, MutableSet

from .protocols import Visitor
from .storage import WordArray, ones, zeros
from .words import MASK, SHIFT, bit_length, count, trailing_zeros, word_mask


class EmptySetError(ValueError):
    """Raised when asking for the maximum of an empty set."""


def format_range(low: int, high: int) -> list[str]:
    """Return the pieces used to print the run of integers `low`..`high`."""
    if low > high:
        return []
    if low == high:
        return [str(low)]
    if low + 1 == high:
        return [str(low), str(high)]
    return [f"{low}..{high}"]


class BitSet(MutableSet[int]):
    """A efficiently stored set of unsigned integers.

    Invariants
    ----------
    * The last word in use, if any, is nonzero.
    * Every word between the length and the capacity of the storage is zero.

    """

    __slots__ = ("storage",)

    def __init__(self, bits: Iterable[int] = ()) -> None:
        """Construct a bitset, ignoring negative values in `bits`."""
        elements = [bit for bit in bits if bit >= 0]
        length = (max(elements) >> SHIFT) + 1 if elements else 0
        self.storage = WordArray(length)

        data = self.storage.data
        for bit in elements:
            data[bit >> SHIFT] |= 1 << (bit & MASK)

    def __contains__(self, bit: Any) -> bool:
        """Check whether `bit` is in the set."""
        if not isinstance(bit, int) or bit < 0:
            return False
        index = bit >> SHIFT
        storage = self.storage
        if index >= storage.length:
            return False
        return (storage.data[index] >> (bit & MASK)) & 1 != 0

    def __iter__(self) -> Iterator[int]:
        """Iterate over the elements of the set in ascending order.

        Elements less than or equal to the most recently produced one may be
        added or discarded during iteration.

        """
        data = self.storage.data
        for i in range(self.storage.length):
            word = data[i]
            if not word:
                continue
            n = i << SHIFT
            while word:
                gap = trailing_zeros(word)
                n += gap
                yield n
                n += 1
                word >>= gap + 1
                while word & 1:
                    yield n
                    n += 1
                    word >>= 1

    def __reversed__(self) -> Iterator[int]:
        """Iterate over the elements of the set in descending order."""
        if not self:
            return
        n = self.max()
        while n != -1:
            yield n
            n = self.prev(n)

    def __len__(self) -> int:
        """Return the number of set bits."""
        data = self.storage.data
        return sum(count(data[i]) for i in range(self.storage.length))

    def __bool__(self) -> bool:
        return self.storage.length != 0

    def __repr__(self) -> str:
        """Return the string representation of a bitset."""
        values = str(set(self)) if self else ""
        return f"{self.__class__.__name__}({values})"

    def __str__(self) -> str:
        """Return the elements in ascending order, with runs as ``a..b``."""
        pieces: list[str] = []

        # the run of consecutive elements seen but not yet printed
        low, high = -1, -2

        def collect(n: int) -> bool:
            nonlocal low, high
            if n == high + 1:
                high += 1
            else:
                pieces.extend(format_range(low, high))
                low = high = n
            return False

        self.visit(collect)
        pieces.extend(format_range(low, high))
        return "{" + " ".join(pieces) + "}"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, BitSet):
            return self.equal(other)
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __le__(self, other: Any) -> bool:
        if isinstance(other, BitSet):
            return self.issubset(other)
        return super().__le__(other)

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, BitSet):
            return other.issubset(self)
        return super().__ge__(other)

    def __and__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.intersection(other)
        return super().__and__(other)

    def __or__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.union(other)
        return super().__or__(other)

    def __xor__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.symmetric_difference(other)
        return super().__xor__(other)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.difference(other)
        return super().__sub__(other)

    def __iand__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.set_and(self, other)
        return super().__iand__(other)

    def __ior__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.set_or(self, other)
        return super().__ior__(other)

    def __ixor__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.set_xor(self, other)
        return super().__ixor__(other)

    def __isub__(self, other: Any) -> Any:
        if isinstance(other, BitSet):
            return self.set_and_not(self, other)
        return super().__isub__(other)

    @property
    def words(self) -> tuple[int, ...]:
        """Return the words in use."""
        return tuple(self.storage.words())

    @property
    def empty(self) -> bool:
        """Return whether the set has no elements."""
        return not self.storage.length

    def equal(self, other: BitSet) -> bool:
        """Return whether `self` and `other` contain the same elements."""
        if self is other:
            return True
        length = self.storage.length
        if length != other.storage.length:
            return False
        return self.storage.data[:length] == other.storage.data[:length]

    def issubset(self, other: BitSet) -> bool:
        """Return whether every element of `self` is in `other`."""
        if self is other:
            return True
        a, b = self.storage, other.storage
        if a.length > b.length:
            return False
        da, db = a.data, b.data
        return not any(da[i] & ~db[i] for i in range(a.length))

    def issuperset(self, other: BitSet) -> bool:
        """Return whether every element of `other` is in `self`."""
        return other.issubset(self)

    def max(self) -> int:
        """Return the largest element of the set.

        Raises
        ------
        EmptySetError
            If the set is empty

        """
        length = self.storage.length
        if not length:
            raise EmptySetError("max not defined for empty set")
        i = length - 1
        return (i << SHIFT) + bit_length(self.storage.data[i]) - 1

    def next(self, m: int) -> int:
        """Return the smallest element greater than `m`, or -1 if none."""
        data = self.storage.data
        length = self.storage.length
        if not length:
            return -1
        if m < 0:
            if data[0] & 1:
                return 0
            m = 0
        i = m >> SHIFT
        if i >= length:
            return -1
        shift = 1 + (m & MASK)
        # zero out the bits for numbers <= m
        word = data[i] >> shift << shift
        while i < length - 1 and not word:
            i += 1
            word = data[i]
        if not word:
            return -1
        return (i << SHIFT) + trailing_zeros(word)

    def prev(self, m: int) -> int:
        """Return the largest element less than `m`, or -1 if none."""
        data = self.storage.data
        length = self.storage.length
        if not length or m <= 0:
            return -1
        i = length - 1
        maximum = (i << SHIFT) + bit_length(data[i]) - 1
        if m > maximum:
            return maximum
        i = m >> SHIFT
        # zero out the bits for numbers >= m
        word = data[i] & ((1 << (m & MASK)) - 1)
        while i > 0 and not word:
            i -= 1
            word = data[i]
        if not word:
            return -1
        return (i << SHIFT) + bit_length(word) - 1

    def visit(self, do: Visitor) -> bool:
        """Call `do` on each element of the set in ascending order.

        If `do` returns a true value the remaining elements are skipped.
        `do` may add or discard elements less than or equal to the element it
        was called with; any other change to the set has undefined results.

        Parameters
        ----------
        do
            A callable taking an element and returning whether to stop.

        Returns
        -------
        bool
            Whether the iteration was aborted.

        """
        for n in self:
            if do(n):
                return True
        return False

    def add(self, bit: int) -> None:
        """Add `bit` to the set. Negative values are ignored."""
        if bit < 0:
            return
        index = bit >> SHIFT
        self.storage.ensure_length(index + 1)
        self.storage.data[index] |= 1 << (bit & MASK)

    def discard(self, bit: int) -> None:
        """Remove `bit` from the set if present."""
        if bit < 0:
            return
        index = bit >> SHIFT
        storage = self.storage
        if index >= storage.length:
            return
        storage.data[index] &= ~(1 << (bit & MASK))
        storage.trim()

    def clear(self) -> None:
        """Remove all elements from the set."""
        self.storage.realloc(0)

    def add_range(self, m: int, n: int) -> BitSet:
        """Add the integers in ``[m, n)`` to the set and return the set.

        Negative values are not added.

        """
        if n < 1 or m >= n:
            return self
        m = max(0, m)
        n -= 1
        low, high = m >> SHIFT, n >> SHIFT
        self.storage.ensure_length(high + 1)
        data = self.storage.data
        if low == high:
            data[low] |= word_mask(m & MASK, n & MASK)
            return self
        data[low] |= word_mask(m & MASK, MASK)
        data[low + 1 : high] = ones(high - low - 1)
        data[high] |= word_mask(0, n & MASK)
        return self

    def delete_range(self, m: int, n: int) -> BitSet:
        """Remove the integers in ``[m, n)`` from the set and return the set."""
        if n < 1 or m >= n:
            return self
        m = max(0, m)
        n -= 1
        storage = self.storage
        length = storage.length
        low, high = m >> SHIFT, n >> SHIFT
        if low >= length:
            return self
        if high >= length:
            # low <= high still holds since low < length
            high = length - 1
            n = MASK
        data = storage.data
        if low == high:
            data[low] &= ~word_mask(m & MASK, n & MASK)
        else:
            data[low] &= ~word_mask(m & MASK, MASK)
            data[low + 1 : high] = zeros(high - low - 1)
            data[high] &= ~word_mask(0, n & MASK)
        storage.trim()
        return self

    def copy_from(self, other: BitSet) -> BitSet:
        """Make `self` contain exactly the elements of `other`."""
        source = other.storage
        length = source.length
        data = source.data
        self.storage.realloc(length)
        self.storage.data[:length] = data[:length]
        return self

    def copy(self) -> BitSet:
        """Return a shallow copy of the set."""
        return type(self)().copy_from(self)

    def intersection(self, other: BitSet) -> BitSet:
        """Return the elements in both `self` and `other`."""
        return type(self)().set_and(self, other)

    def union(self, other: BitSet) -> BitSet:
        """Return the elements in either `self` or `other`."""
        return type(self)().set_or(self, other)

    def symmetric_difference(self, other: BitSet) -> BitSet:
        """Return the elements in exactly one of `self` and `other`."""
        return type(self)().set_xor(self, other)

    def difference(self, other: BitSet) -> BitSet:
        """Return the elements in `self` but not in `other`."""
        return type(self)().set_and_not(self, other)

    def _reshape(self, length: int, a: BitSet, b: BitSet) -> None:
        # When self is an operand its old words must survive resizing, since
        # they are still read after the storage changes.
        if self is a or self is b:
            self.storage.set_length(length)
        else:
            self.storage.realloc(length)

    def set_and(self, a: BitSet, b: BitSet) -> BitSet:
        """Set `self` to the intersection of `a` and `b` and return it."""
        da, db = a.storage.data, b.storage.data
        # find the last nonzero word of the result
        n = min(a.storage.length, b.storage.length) - 1
        while n >= 0 and not da[n] & db[n]:
            n -= 1
        self._reshape(n + 1, a, b)
        data = self.storage.data
        for i in range(n + 1):
            data[i] = da[i] & db[i]
        return self

    def set_and_not(self, a: BitSet, b: BitSet) -> BitSet:
        """Set `self` to the elements of `a` not in `b` and return it."""
        da, db = a.storage.data, b.storage.data
        la, lb = a.storage.length, b.storage.length
        n = la - 1
        # the result needs all of a's words when a is longer than b
        if la <= lb:
            while n >= 0 and not da[n] & ~db[n]:
                n -= 1
        self._reshape(n + 1, a, b)
        data = self.storage.data
        if lb <= n:
            data[lb : n + 1] = da[lb : n + 1]
            n = lb - 1
        for i in range(n + 1):
            data[i] = da[i] & ~db[i]
        return self

    def set_or(self, a: BitSet, b: BitSet) -> BitSet:
        """Set `self` to the union of `a` and `b` and return it."""
        if a.storage.length > b.storage.length:
            a, b = b, a
        da, db = a.storage.data, b.storage.data
        la, lb = a.storage.length, b.storage.length
        self._reshape(lb, a, b)
        data = self.storage.data
        data[la:lb] = db[la:lb]
        for i in range(la):
            data[i] = da[i] | db[i]
        return self

    def set_xor(self, a: BitSet, b: BitSet) -> BitSet:
        """Set `self` to the symmetric difference of `a` and `b` and return it."""
        if a.storage.length > b.storage.length:
            a, b = b, a
        da, db = a.storage.data, b.storage.data
        la, lb = a.storage.length, b.storage.length
        n = lb - 1
        # only equal lengths can produce a result shorter than b
        if la == lb:
            while n >= 0 and not da[n] ^ db[n]:
                n -= 1
            if n == -1:
                self.storage.realloc(0)
                return self
        self._reshape(n + 1, a, b)
        data = self.storage.data
        if la <= n:
            data[la : n + 1] = db[la : n + 1]
            n = la - 1
        for i in range(n + 1):
            data[i] = da[i] ^ db[i]
        return self
