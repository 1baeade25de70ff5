"""Capability interface shared by every graph representation.

``Graph`` defines what algorithms may assume about a graph: identity of
vertices and edges, iteration, incidence, adjacency and property-map
allocation. Concrete representations implement the abstract methods; the
derived operations (``opposite``, ``neighbors``, subgraph construction,
union-find allocation, ...) work unmodified on top of them.

Iteration methods return a fresh iterator on every call, so a sequence can be
restarted simply by calling the method again.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Protocol, Tuple

from numpy.typing import DTypeLike

from fastgraph.errors import InvalidArgumentError, UnsupportedError
from fastgraph.graph.props import PropertyMap
from fastgraph.types.base import EdgeId, Orientation, VertexId
from fastgraph.types.optional import OptionalId

if TYPE_CHECKING:
    from fastgraph.graph.subgraph import Subgraph
    from fastgraph.unionfind import UnionFind


class RandomSource(Protocol):
    """Randomness accepted by ``choose_*``.

    Any object with ``randrange(n)`` returning a uniform int in ``[0, n)``
    qualifies, notably ``random.Random``.
    """

    def randrange(self, n: int) -> int: ...


def _pick(rng: Any, candidates: List[Any], what: str) -> Any:
    if not candidates:
        raise InvalidArgumentError(f"Cannot choose {what}: no candidates")
    return candidates[rng.randrange(len(candidates))]


class Graph(abc.ABC):
    """Abstract graph: the contract every representation must satisfy."""

    @property
    @abc.abstractmethod
    def orientation(self) -> Orientation:
        """Whether the edges of this graph are directed."""

    # Vertices

    @property
    @abc.abstractmethod
    def num_vertices(self) -> int: ...

    @abc.abstractmethod
    def vertices(self) -> Iterator[VertexId]:
        """Iterate over all vertices, each exactly once."""

    def vertex_none(self) -> OptionalId:
        return OptionalId.none()

    # Edges

    @property
    @abc.abstractmethod
    def num_edges(self) -> int: ...

    @abc.abstractmethod
    def edges(self) -> Iterator[EdgeId]:
        """Iterate over all edges, each exactly once."""

    def edge_none(self) -> OptionalId:
        return OptionalId.none()

    @abc.abstractmethod
    def source(self, e: EdgeId) -> VertexId: ...

    @abc.abstractmethod
    def target(self, e: EdgeId) -> VertexId: ...

    def endvertices(self, e: EdgeId) -> Tuple[VertexId, VertexId]:
        """Return ``(source(e), target(e))``."""
        return self.source(e), self.target(e)

    def reverse(self, e: EdgeId) -> EdgeId:
        """Return ``e`` traversed in the opposite direction.

        Raises:
            UnsupportedError: If the graph's edges have no reverse.
        """
        raise UnsupportedError(
            f"{type(self).__name__} does not support reversing edge {e!r}"
        )

    def opposite(self, u: VertexId, e: EdgeId) -> VertexId:
        """Return the endpoint of ``e`` other than ``u``.

        Raises:
            InvalidArgumentError: If ``u`` is not an endpoint of ``e``.
        """
        s, t = self.endvertices(e)
        if u == s:
            return t
        if u == t:
            return s
        raise InvalidArgumentError(f"Vertex {u!r} is not an endpoint of edge {e!r}")

    # Incidence

    @abc.abstractmethod
    def degree(self, v: VertexId) -> int: ...

    @abc.abstractmethod
    def inc_edges(self, v: VertexId) -> Iterator[EdgeId]:
        """Iterate over the edges whose source is ``v``."""

    # Adjacency

    def neighbors(self, v: VertexId) -> Iterator[VertexId]:
        """Lazily map ``inc_edges(v)`` through ``target``."""
        return map(self.target, self.inc_edges(v))

    # Properties

    @abc.abstractmethod
    def vertex_prop(self, value: Any) -> PropertyMap:
        """Return a vertex map with every slot holding a copy of ``value``."""

    @abc.abstractmethod
    def edge_prop(self, value: Any) -> PropertyMap:
        """Return an edge map with every slot holding a copy of ``value``."""

    @abc.abstractmethod
    def vertex_array(self, fill: Any = 0, dtype: DTypeLike = None) -> PropertyMap:
        """Return a numpy-backed vertex map filled with ``fill``."""

    @abc.abstractmethod
    def edge_array(self, fill: Any = 0, dtype: DTypeLike = None) -> PropertyMap:
        """Return a numpy-backed edge map filled with ``fill``."""

    # Random choice. Representations with dense storage override these
    # with constant-time picks.

    def choose_vertex(self, rng: RandomSource) -> VertexId:
        """Return a vertex picked uniformly at random."""
        return _pick(rng, list(self.vertices()), "a vertex")

    def choose_edge(self, rng: RandomSource) -> EdgeId:
        """Return an edge picked uniformly at random."""
        return _pick(rng, list(self.edges()), "an edge")

    def choose_inc_edge(self, rng: RandomSource, v: VertexId) -> EdgeId:
        """Return an edge incident to ``v`` picked uniformly at random."""
        return _pick(rng, list(self.inc_edges(v)), f"an edge incident to {v!r}")

    # Derived structures

    def spanning_subgraph(self, edges: Iterable[EdgeId]) -> "Subgraph":
        """Return a view with every vertex and only ``edges``."""
        from fastgraph.graph.subgraph import spanning_subgraph

        return spanning_subgraph(self, edges)

    def edge_induced_subgraph(self, edges: Iterable[EdgeId]) -> "Subgraph":
        """Return a view with ``edges`` and the vertices they touch."""
        from fastgraph.graph.subgraph import edge_induced_subgraph

        return edge_induced_subgraph(self, edges)

    def induced_subgraph(self, vertices: Iterable[VertexId]) -> "Subgraph":
        """Return a view with ``vertices`` and every edge between them."""
        from fastgraph.graph.subgraph import induced_subgraph

        return induced_subgraph(self, vertices)

    def new_unionfind(self) -> "UnionFind":
        """Return a union-find with every vertex in its own set."""
        from fastgraph.unionfind import UnionFind

        return UnionFind(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_vertices={self.num_vertices}, "
            f"num_edges={self.num_edges}, orientation={self.orientation.name})"
        )
