"""A growable buffer of 64-bit words with explicit length and capacity.

The buffer keeps every slot between its logical length and its capacity zero,
so growing in place never needs to clear stale bits.

"""

import logging
from array import array

from .words import MAX_WORD, new_capacity

logger = logging.getLogger(__name__)

TYPECODE = "Q"


def zeros(length: int) -> array:
    """Return an array of `length` zero words."""
    return array(TYPECODE, [0]) * length


def ones(length: int) -> array:
    """Return an array of `length` words with every bit set."""
    return array(TYPECODE, [MAX_WORD]) * length


class WordArray:
    """An owned buffer of words with a logical length below its capacity.

    Attributes
    ----------
    data
        The physical storage. Its length is the capacity of the buffer.
    length
        The number of words in use.

    """

    __slots__ = "data", "length"

    def __init__(self, length: int = 0) -> None:
        """Construct a zeroed :class:`~densebit.storage.WordArray`."""
        self.data = zeros(length)
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        words = ", ".join(f"{word:#x}" for word in self.words())
        return f"{type(self).__name__}([{words}], capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        """Return the number of words allocated."""
        return len(self.data)

    def words(self) -> array:
        """Return a copy of the words in use."""
        return self.data[: self.length]

    def realloc(self, length: int) -> bool:
        """Set the logical length to `length`, possibly discarding old words.

        Returns whether new memory was allocated, in which case the buffer is
        all zeros. Otherwise the words below `length` are left untouched.

        """
        capacity = len(self.data)
        if capacity < length:
            capacity = new_capacity(length, capacity)
            logger.debug("allocating %d words for length %d", capacity, length)
            self.data = zeros(capacity)
            self.length = length
            return True
        old_length = self.length
        if length < old_length:
            self.data[length:old_length] = zeros(old_length - length)
        self.length = length
        return False

    def set_length(self, length: int) -> None:
        """Set the logical length to `length`, keeping the old words."""
        data = self.data
        old_length = self.length
        if self.realloc(length):
            self.data[:old_length] = data[:old_length]

    def ensure_length(self, length: int) -> None:
        """Grow the logical length to at least `length`, keeping the old words."""
        if length > self.length:
            self.set_length(length)

    def trim(self) -> None:
        """Remove all trailing zero words from the logical length."""
        data = self.data
        n = self.length - 1
        while n >= 0 and not data[n]:
            n -= 1
        self.length = n + 1
