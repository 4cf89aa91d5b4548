"""Various densebit related protocol classes."""

import abc

from typing_extensions import Protocol


class Visitor(Protocol):
    """A protocol for callbacks passed to :meth:`~densebit.bitset.BitSet.visit`."""

    @abc.abstractmethod
    def __call__(self, element: int) -> bool:
        """Visit `element` and return whether to skip the remaining elements."""
