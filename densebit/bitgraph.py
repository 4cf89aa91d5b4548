"""Implementation of a graph whose vertices are unsigned integers."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, MutableMapping

import toolz

from .bitset import BitSet


class BitGraph:
    """An immutable directed graph whose vertices are unsigned integers.

    The successors of each vertex are stored as a :class:`~densebit.BitSet`.

    """

    __slots__ = "_nodes", "_predecessors"

    def __init__(self, nodes: Mapping[int, Iterable[int]]) -> None:
        self._nodes: Mapping[int, BitSet] = toolz.valmap(BitSet, nodes)
        self._predecessors: MutableMapping[int, BitSet] = {}

        for parent, children in self._nodes.items():
            for child in children:
                self._predecessors.setdefault(child, BitSet()).add(parent)

    @classmethod
    def from_vertices_and_edges(
        cls,
        *,
        vertices: Iterable[int],
        edges: Iterable[tuple[int, int]],
    ) -> BitGraph:
        """Construct a `BitGraph` from `vertices` and `edges`."""
        nodes = {vertex: BitSet() for vertex in vertices}
        for source, dest in edges:
            nodes[source].add(dest)
        return cls(nodes)

    @property
    def nodes(self) -> Mapping[int, BitSet]:
        """Return a mapping from node to its successors."""
        return self._nodes

    @property
    def predecessors(self) -> Mapping[int, BitSet]:
        """Return a mapping from node to the nodes with an edge into it."""
        return self._predecessors

    @property
    def sinks(self) -> Iterator[int]:
        """Return the nodes with outdegree zero."""
        return (source for source, nodes in self._nodes.items() if not nodes)

    def reachable(self, source: int) -> BitSet:
        """Return the nodes reachable from `source`, including `source`."""
        seen = BitSet((source,))
        frontier = BitSet((source,))
        step = BitSet()
        while frontier:
            step.clear()
            for node in frontier:
                successors = self._nodes.get(node)
                if successors is not None:
                    step.set_or(step, successors)
            frontier.set_and_not(step, seen)
            seen.set_or(seen, frontier)
        return seen

    def __eq__(self, other: Any) -> bool:
        return self.nodes == other.nodes and self.predecessors == other.predecessors
