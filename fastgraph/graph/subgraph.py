"""Filtered read-only views over an existing graph.

A ``Subgraph`` restricts which vertices and edges of a base graph are visible
and recomputes incidence lists for them. Edge semantics (``source``,
``target``, ``reverse``, ``opposite``) always come from the base graph, and no
payload is copied: the view keeps a shared reference to its base, which is
safe because graphs are immutable.

Property maps requested through a subgraph are allocated by the base graph
and are therefore sized to the base graph's full vertex or edge count, not to
the subgraph's. Ids of the subgraph index them correctly; just do not rely on
``len(map)`` matching ``num_vertices``/``num_edges`` of the view.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Tuple

from numpy.typing import DTypeLike

from fastgraph.errors import InvalidArgumentError
from fastgraph.graph.base import Graph, RandomSource
from fastgraph.graph.props import PropertyMap
from fastgraph.logging import get_logger
from fastgraph.types.base import EdgeId, Orientation, VertexId

logger = get_logger(__name__)

__all__ = [
    "Subgraph",
    "edge_induced_subgraph",
    "induced_subgraph",
    "spanning_subgraph",
]


class Subgraph(Graph):
    """Graph view made of selected vertices and edges of ``base``.

    Normally created with ``spanning_subgraph``, ``edge_induced_subgraph`` or
    ``induced_subgraph`` (also available as methods on any ``Graph``).

    Args:
        base: The wrapped graph; shared, not copied.
        vertices: Visible vertices, in iteration order.
        edges: Visible edges, in iteration order.
        inc: Base-keyed vertex map holding the visible incidence list of each
            vertex.
    """

    def __init__(
        self,
        base: Graph,
        vertices: List[VertexId],
        edges: List[EdgeId],
        inc: PropertyMap,
    ) -> None:
        self._base = base
        self._vertices = vertices
        self._edges = edges
        self._inc = inc

    @property
    def base(self) -> Graph:
        return self._base

    @property
    def orientation(self) -> Orientation:
        return self._base.orientation

    # Vertices

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    def vertices(self) -> Iterator[VertexId]:
        return iter(self._vertices)

    # Edges

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def edges(self) -> Iterator[EdgeId]:
        return iter(self._edges)

    def source(self, e: EdgeId) -> VertexId:
        return self._base.source(e)

    def target(self, e: EdgeId) -> VertexId:
        return self._base.target(e)

    def endvertices(self, e: EdgeId) -> Tuple[VertexId, VertexId]:
        return self._base.endvertices(e)

    def reverse(self, e: EdgeId) -> EdgeId:
        return self._base.reverse(e)

    def opposite(self, u: VertexId, e: EdgeId) -> VertexId:
        return self._base.opposite(u, e)

    # Incidence

    def degree(self, v: VertexId) -> int:
        return len(self._inc[v])

    def inc_edges(self, v: VertexId) -> Iterator[EdgeId]:
        return iter(self._inc[v])

    def neighbors(self, v: VertexId) -> Iterator[VertexId]:
        return map(self._base.target, self._inc[v])

    # Properties are sized to the base graph

    def vertex_prop(self, value: Any) -> PropertyMap:
        return self._base.vertex_prop(value)

    def edge_prop(self, value: Any) -> PropertyMap:
        return self._base.edge_prop(value)

    def vertex_array(self, fill: Any = 0, dtype: DTypeLike = None) -> PropertyMap:
        return self._base.vertex_array(fill, dtype)

    def edge_array(self, fill: Any = 0, dtype: DTypeLike = None) -> PropertyMap:
        return self._base.edge_array(fill, dtype)

    # Random choice

    def choose_vertex(self, rng: RandomSource) -> VertexId:
        if not self._vertices:
            raise InvalidArgumentError("Cannot choose a vertex: subgraph has no vertices")
        return self._vertices[rng.randrange(len(self._vertices))]

    def choose_edge(self, rng: RandomSource) -> EdgeId:
        if not self._edges:
            raise InvalidArgumentError("Cannot choose an edge: subgraph has no edges")
        return self._edges[rng.randrange(len(self._edges))]

    def choose_inc_edge(self, rng: RandomSource, v: VertexId) -> EdgeId:
        inc = self._inc[v]
        if not inc:
            raise InvalidArgumentError(
                f"Cannot choose an edge incident to {v!r}: vertex has degree 0"
            )
        return inc[rng.randrange(len(inc))]


def _add_incidence(g: Graph, inc: PropertyMap, e: EdgeId) -> None:
    u, v = g.endvertices(e)
    inc[u].append(e)
    if g.orientation is Orientation.UNDIRECTED:
        inc[v].append(g.reverse(e))


def spanning_subgraph(g: Graph, edges: Iterable[EdgeId]) -> Subgraph:
    """Return a view of ``g`` with all its vertices and only ``edges``.

    Vertices not touched by ``edges`` keep an empty incidence list.
    """
    edges = list(edges)
    inc = g.vertex_prop([])
    for e in edges:
        _add_incidence(g, inc, e)

    sub = Subgraph(g, list(g.vertices()), edges, inc)
    logger.debug(f"Built spanning subgraph: {sub.num_vertices} vertices, {len(edges)} edges")
    return sub


def edge_induced_subgraph(g: Graph, edges: Iterable[EdgeId]) -> Subgraph:
    """Return a view of ``g`` with ``edges`` and exactly the vertices they touch.

    Vertices appear in the order they are first seen while scanning ``edges``.
    """
    edges = list(edges)
    seen = g.vertex_array(False, dtype=bool)
    vertices: List[VertexId] = []
    inc = g.vertex_prop([])
    for e in edges:
        for v in g.endvertices(e):
            if not seen[v]:
                seen[v] = True
                vertices.append(v)
        _add_incidence(g, inc, e)

    sub = Subgraph(g, vertices, edges, inc)
    logger.debug(
        f"Built edge-induced subgraph: {len(vertices)} vertices, {len(edges)} edges"
    )
    return sub


def induced_subgraph(g: Graph, vertices: Iterable[VertexId]) -> Subgraph:
    """Return a view of ``g`` with ``vertices`` and every edge joining two of them.

    Membership is tested through a vertex map, so the cost is linear in the
    total degree of ``vertices``. Edges are listed in discovery order. The
    vertex sequence is kept as given; a repeated vertex does not repeat its
    incidence entries.
    """
    vertices = list(vertices)
    member = g.vertex_array(False, dtype=bool)
    for u in vertices:
        member[u] = True

    done = g.vertex_array(False, dtype=bool)
    seen_edge = g.edge_array(False, dtype=bool)
    edges: List[EdgeId] = []
    inc = g.vertex_prop([])
    for u in vertices:
        if done[u]:
            continue
        done[u] = True
        for e in g.inc_edges(u):
            if not member[g.target(e)]:
                continue
            inc[u].append(e)
            if not seen_edge[e]:
                seen_edge[e] = True
                edges.append(e)

    sub = Subgraph(g, vertices, edges, inc)
    logger.debug(f"Built induced subgraph: {len(vertices)} vertices, {len(edges)} edges")
    return sub
