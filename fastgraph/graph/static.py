"""Compact immutable graph with paired forward/reverse edge identifiers.

Canonical edge ``i`` stores its two endpoints at ``endvertices[2i]`` and
``endvertices[2i + 1]``. An edge identifier is the raw integer ``2i + d``:

- ``d == 1`` (forward): source is ``endvertices[2i]``, target is
  ``endvertices[2i + 1]``;
- ``d == 0`` (reverse): source and target are swapped.

So ``target(e) = endvertices[raw]``, ``source(e) = endvertices[raw ^ 1]`` and
``reverse(e)`` is a single bit flip. Incidence lists hold, for each vertex,
the identifiers whose source is that vertex, packed in CSR form.

Graphs are populated only through ``StaticGraphBuilder``; once finalized
they cannot be modified.
"""

from __future__ import annotations

import functools
import itertools
import operator
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import DTypeLike

from fastgraph.config import GRAPH_CONFIG
from fastgraph.errors import CapacityExceededError, GraphError, InvalidArgumentError
from fastgraph.graph.base import Graph, RandomSource
from fastgraph.graph.props import PropertyMap
from fastgraph.logging import get_logger
from fastgraph.types.base import IdWidth, Orientation

logger = get_logger(__name__)

__all__ = ["StaticEdge", "StaticGraph", "StaticGraphBuilder"]


@functools.total_ordering
class StaticEdge:
    """Edge identifier of a ``StaticGraph``.

    Two identifiers with the same canonical index denote the same edge, so
    they compare and hash equal even when they face opposite directions.
    Use ``raw`` or ``is_forward`` to tell the directions apart.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: int) -> None:
        self._raw = int(raw)

    @classmethod
    def forward(cls, index: int) -> "StaticEdge":
        return cls(2 * index + 1)

    @classmethod
    def backward(cls, index: int) -> "StaticEdge":
        return cls(2 * index)

    @property
    def raw(self) -> int:
        """The encoded value ``2 * index + direction``."""
        return self._raw

    @property
    def index(self) -> int:
        """Canonical edge index, independent of direction."""
        return self._raw >> 1

    @property
    def is_forward(self) -> bool:
        return bool(self._raw & 1)

    def reverse(self) -> "StaticEdge":
        return StaticEdge(self._raw ^ 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticEdge):
            return NotImplemented
        return self.index == other.index

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StaticEdge):
            return NotImplemented
        return self.index < other.index

    def __hash__(self) -> int:
        return hash(self.index)

    def __repr__(self) -> str:
        if self.is_forward:
            return f"StaticEdge({self.index})"
        return f"StaticEdge({self.index}, reversed)"


def _edge_index(e: StaticEdge) -> int:
    return e.index


class StaticGraph(Graph):
    """Immutable array-backed graph with integer vertices ``0..n-1``.

    Instances are created by ``StaticGraphBuilder.finalize``; use
    ``StaticGraph.builder`` or ``StaticGraph.from_edges`` to obtain one.

    Attributes:
        vertex_width: Width bounding the vertex count.
        edge_width: Width bounding twice the edge count.
    """

    def __init__(
        self,
        num_vertices: int,
        endvertices: np.ndarray,
        inc_offsets: np.ndarray,
        inc_raw: np.ndarray,
        vertex_width: IdWidth,
        edge_width: IdWidth,
        orientation: Orientation,
    ) -> None:
        for arr in (endvertices, inc_offsets, inc_raw):
            arr.flags.writeable = False
        self._num_vertices = num_vertices
        self._endvertices = endvertices
        self._inc_offsets = inc_offsets
        self._inc_raw = inc_raw
        self.vertex_width = vertex_width
        self.edge_width = edge_width
        self._orientation = orientation

    @classmethod
    def builder(
        cls,
        num_vertices: int,
        num_edges_hint: int = 0,
        *,
        vertex_width: Optional[IdWidth] = None,
        edge_width: Optional[IdWidth] = None,
        orientation: Optional[Orientation] = None,
    ) -> "StaticGraphBuilder":
        """Start building a graph with ``num_vertices`` vertices."""
        return StaticGraphBuilder(
            num_vertices,
            num_edges_hint,
            vertex_width=vertex_width,
            edge_width=edge_width,
            orientation=orientation,
        )

    @classmethod
    def from_edges(
        cls, num_vertices: int, pairs: Iterable[Tuple[int, int]] = (), **kwargs: Any
    ) -> "StaticGraph":
        """Build a graph from ``(u, v)`` pairs, added in order.

        Keyword arguments are forwarded to ``StaticGraph.builder``.
        """
        pairs = list(pairs)
        builder = cls.builder(num_vertices, len(pairs), **kwargs)
        for u, v in pairs:
            builder.add_edge(u, v)
        return builder.finalize()

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    # Vertices

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    def vertices(self) -> Iterator[int]:
        return iter(range(self._num_vertices))

    # Edges

    @property
    def num_edges(self) -> int:
        return len(self._endvertices) // 2

    def edges(self) -> Iterator[StaticEdge]:
        return map(StaticEdge.forward, range(self.num_edges))

    def edge(self, index: int) -> StaticEdge:
        """Return the forward identifier of canonical edge ``index``.

        Raises:
            InvalidArgumentError: If ``index`` is not a canonical edge index.
        """
        if not 0 <= index < self.num_edges:
            raise InvalidArgumentError(
                f"Edge index {index} out of range for {self.num_edges} edges"
            )
        return StaticEdge.forward(index)

    @staticmethod
    def to_canonical_index(e: StaticEdge) -> int:
        return e.index

    def _raw(self, e: StaticEdge) -> int:
        raw = e.raw
        if not 0 <= raw < len(self._endvertices):
            raise InvalidArgumentError(
                f"Edge {e!r} out of range for {self.num_edges} edges"
            )
        return raw

    def _vertex(self, v: int) -> int:
        v = operator.index(v)
        if not 0 <= v < self._num_vertices:
            raise InvalidArgumentError(
                f"Vertex {v} out of range for {self._num_vertices} vertices"
            )
        return v

    def source(self, e: StaticEdge) -> int:
        return int(self._endvertices[self._raw(e) ^ 1])

    def target(self, e: StaticEdge) -> int:
        return int(self._endvertices[self._raw(e)])

    def reverse(self, e: StaticEdge) -> StaticEdge:
        if self._orientation is Orientation.DIRECTED:
            return super().reverse(e)
        self._raw(e)
        return e.reverse()

    @property
    def endvertices_array(self) -> np.ndarray:
        """Read-only flat endpoint array of length ``2 * num_edges``."""
        return self._endvertices

    # Incidence

    def degree(self, v: int) -> int:
        v = self._vertex(v)
        return int(self._inc_offsets[v + 1] - self._inc_offsets[v])

    def inc_edges(self, v: int) -> Iterator[StaticEdge]:
        v = self._vertex(v)
        lo, hi = self._inc_offsets[v], self._inc_offsets[v + 1]
        return map(StaticEdge, self._inc_raw[lo:hi].tolist())

    def incidence(self, v: int) -> List[StaticEdge]:
        """Return the incidence list of ``v`` in insertion order."""
        return list(self.inc_edges(v))

    # Properties

    def vertex_prop(self, value: Any) -> PropertyMap:
        return PropertyMap.filled(operator.index, value, self._num_vertices)

    def edge_prop(self, value: Any) -> PropertyMap:
        return PropertyMap.filled(_edge_index, value, self.num_edges)

    def vertex_array(self, fill: Any = 0, dtype: DTypeLike = None) -> PropertyMap:
        return PropertyMap.array(operator.index, fill, self._num_vertices, dtype)

    def edge_array(self, fill: Any = 0, dtype: DTypeLike = None) -> PropertyMap:
        return PropertyMap.array(_edge_index, fill, self.num_edges, dtype)

    # Random choice

    def choose_vertex(self, rng: RandomSource) -> int:
        if self._num_vertices == 0:
            raise InvalidArgumentError("Cannot choose a vertex: graph has no vertices")
        return rng.randrange(self._num_vertices)

    def choose_edge(self, rng: RandomSource) -> StaticEdge:
        if self.num_edges == 0:
            raise InvalidArgumentError("Cannot choose an edge: graph has no edges")
        return StaticEdge.forward(rng.randrange(self.num_edges))

    def choose_inc_edge(self, rng: RandomSource, v: int) -> StaticEdge:
        deg = self.degree(v)
        if deg == 0:
            raise InvalidArgumentError(
                f"Cannot choose an edge incident to {v}: vertex has degree 0"
            )
        return StaticEdge(self._inc_raw[self._inc_offsets[v] + rng.randrange(deg)])


class StaticGraphBuilder:
    """Accumulates edges for a ``StaticGraph``.

    Args:
        num_vertices: Number of vertices; they are named ``0..num_vertices-1``.
        num_edges_hint: Expected number of edges, used to preallocate storage.
        vertex_width: Vertex id width; defaults to ``GRAPH_CONFIG``.
        edge_width: Edge id width; defaults to ``GRAPH_CONFIG``.
        orientation: Edge orientation; defaults to ``GRAPH_CONFIG``.

    Raises:
        CapacityExceededError: If ``num_vertices`` does not fit ``vertex_width``.
    """

    def __init__(
        self,
        num_vertices: int,
        num_edges_hint: int = 0,
        *,
        vertex_width: Optional[IdWidth] = None,
        edge_width: Optional[IdWidth] = None,
        orientation: Optional[Orientation] = None,
    ) -> None:
        opts = GRAPH_CONFIG.builder_kwargs(vertex_width, edge_width, orientation)
        self.vertex_width: IdWidth = opts["vertex_width"]
        self.edge_width: IdWidth = opts["edge_width"]
        self.orientation: Orientation = opts["orientation"]

        if num_vertices < 0:
            raise InvalidArgumentError(
                f"Number of vertices must be non-negative, got {num_vertices}"
            )
        if not self.vertex_width.is_valid(num_vertices):
            logger.error(
                f"{num_vertices} vertices exceed the {self.vertex_width.name} "
                f"vertex id width"
            )
            raise CapacityExceededError(
                f"{num_vertices} vertices do not fit vertex id width "
                f"{self.vertex_width.name} (max {self.vertex_width.max_value - 1})"
            )

        self._num_vertices = num_vertices
        self._ends = np.empty(2 * max(num_edges_hint, 0), dtype=self.vertex_width.dtype)
        self._len = 0
        self._inc: List[List[int]] = [[] for _ in range(num_vertices)]
        self._finalized = False

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        return self._len // 2

    def _check_vertex(self, v: Any) -> int:
        v = operator.index(v)
        if not 0 <= v < self._num_vertices:
            raise InvalidArgumentError(
                f"Vertex {v} out of range for {self._num_vertices} vertices"
            )
        return v

    def _reserve(self, needed: int) -> None:
        if needed <= len(self._ends):
            return
        grown = np.empty(max(needed, 2 * len(self._ends)), dtype=self._ends.dtype)
        grown[: self._len] = self._ends[: self._len]
        self._ends = grown

    def add_edge(self, u: int, v: int) -> StaticEdge:
        """Append edge ``(u, v)`` and return its forward identifier.

        Raises:
            InvalidArgumentError: If ``u`` or ``v`` is not a vertex.
            GraphError: If the builder was already finalized.
        """
        if self._finalized:
            raise GraphError("Cannot add edges: builder was already finalized")
        u = self._check_vertex(u)
        v = self._check_vertex(v)

        self._reserve(self._len + 2)
        self._ends[self._len] = u
        self._ends[self._len + 1] = v
        self._len += 2

        i = (self._len - 2) // 2
        self._inc[u].append(2 * i + 1)
        if self.orientation is Orientation.UNDIRECTED:
            self._inc[v].append(2 * i)
        return StaticEdge.forward(i)

    def finalize(self) -> StaticGraph:
        """Validate the edge count and return the immutable graph.

        Raises:
            CapacityExceededError: If ``2 * num_edges`` does not fit the edge
                id width. No graph is returned in that case.
            GraphError: If the builder was already finalized.
        """
        if self._finalized:
            raise GraphError("Builder was already finalized")
        if not self.edge_width.is_valid(self._len):
            logger.error(
                f"{self.num_edges} edges exceed the {self.edge_width.name} edge id width"
            )
            raise CapacityExceededError(
                f"{self.num_edges} edges need raw ids up to {self._len}, which do not "
                f"fit edge id width {self.edge_width.name} "
                f"(max {self.edge_width.max_value - 1})"
            )

        n = self._num_vertices
        degrees = np.fromiter((len(lst) for lst in self._inc), dtype=np.intp, count=n)
        offsets = np.zeros(n + 1, dtype=np.intp)
        np.cumsum(degrees, out=offsets[1:])
        inc_raw = np.fromiter(
            itertools.chain.from_iterable(self._inc),
            dtype=self.edge_width.dtype,
            count=int(offsets[-1]),
        )
        endvertices = self._ends[: self._len].copy()

        self._finalized = True
        self._inc = []
        self._ends = np.empty(0, dtype=self._ends.dtype)

        graph = StaticGraph(
            n,
            endvertices,
            offsets,
            inc_raw,
            self.vertex_width,
            self.edge_width,
            self.orientation,
        )
        logger.debug(
            f"Finalized StaticGraph with {graph.num_vertices} vertices and "
            f"{graph.num_edges} edges ({self.orientation.name}, "
            f"vertex width {self.vertex_width.name}, edge width {self.edge_width.name})"
        )
        return graph

    def finalize_with_order(self) -> Tuple[StaticGraph, List[int], List[StaticEdge]]:
        """Finalize and also return the vertex and edge iteration order."""
        graph = self.finalize()
        return graph, list(graph.vertices()), list(graph.edges())
