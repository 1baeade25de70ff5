"""Disjoint sets over the vertex domain of a graph.

Parent pointers and ranks are stored in property maps allocated by the graph
itself, so ``UnionFind`` works unmodified on any ``Graph`` representation,
subgraphs included.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from fastgraph.graph.base import Graph
from fastgraph.logging import get_logger
from fastgraph.types.base import VertexId

logger = get_logger(__name__)

__all__ = ["UnionFind", "new_unionfind"]


class UnionFind:
    """Union by rank with path halving.

    ``find`` and ``in_same_set`` shorten parent chains as a side effect, so
    even queries mutate the structure; do not share an instance between
    threads without external locking.

    Args:
        graph: Graph whose vertices seed the singleton sets.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self.parent = graph.vertex_prop(None)
        self.rank = graph.vertex_array(0, dtype=np.uint8)
        self._num_sets = 0
        for v in graph.vertices():
            self.make_set(v)

    @property
    def num_sets(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._num_sets

    def make_set(self, v: VertexId) -> bool:
        """Add ``v`` as a singleton set unless it already belongs to one.

        Returns:
            True if ``v`` was added, False if it was already tracked.
        """
        if self.parent[v] is not None:
            return False
        self.parent[v] = v
        self.rank[v] = 0
        self._num_sets += 1
        return True

    def find(self, v: VertexId) -> VertexId:
        """Return the representative of the set containing ``v``."""
        parent = self.parent
        while parent[v] != v:
            # Point every other node on the path at its grandparent
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    def union(self, u: VertexId, v: VertexId) -> bool:
        """Merge the sets containing ``u`` and ``v``.

        Returns:
            True if two distinct sets were merged, False if already joined.
        """
        ru = self.find(u)
        rv = self.find(v)
        if ru == rv:
            return False

        rank = self.rank
        if rank[ru] < rank[rv]:
            ru, rv = rv, ru
        self.parent[rv] = ru
        if rank[ru] == rank[rv]:
            rank[ru] += 1
        self._num_sets -= 1
        return True

    def in_same_set(self, u: VertexId, v: VertexId) -> bool:
        return self.find(u) == self.find(v)

    def reset(self, graph: Optional[Graph] = None) -> None:
        """Turn every vertex of ``graph`` back into a singleton set.

        The existing maps are reused, so ``graph`` must be the graph this
        instance was created for (the default) or share its vertex domain.
        """
        graph = self._graph if graph is None else graph
        self.parent.fill(None)
        self.rank.fill(0)
        self._num_sets = 0
        for v in graph.vertices():
            self.make_set(v)
        logger.debug(f"Reset union-find to {self._num_sets} singleton sets")


def new_unionfind(graph: Graph) -> UnionFind:
    """Return a union-find with every vertex of ``graph`` in its own set."""
    return UnionFind(graph)
