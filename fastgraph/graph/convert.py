"""Conversion utilities between fastgraph graphs and NetworkX graphs.

Example:
    >>> import networkx as nx
    >>> from fastgraph.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B")
    >>> graph, node_map = from_networkx(G)
    >>> graph.num_vertices
    2
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from fastgraph.graph.base import Graph
from fastgraph.graph.static import StaticGraph
from fastgraph.types.base import IdWidth, Orientation

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between NetworkX node names and vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in vertex order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def to_networkx(graph: Graph, edge_attr: str = "edge") -> Union[nx.MultiGraph, nx.MultiDiGraph]:
    """Convert any fastgraph graph to a NetworkX multigraph.

    Every vertex becomes a node. Every edge becomes one NetworkX edge from its
    source to its target; edges with an integer ``index`` (static edges) use it
    as the edge key. The original edge id is stored under ``edge_attr``.

    Args:
        graph: Graph to convert; subgraphs export only their visible part.
        edge_attr: Attribute name that receives the original edge id.

    Returns:
        ``nx.MultiDiGraph`` for directed graphs, ``nx.MultiGraph`` otherwise.
    """
    if graph.orientation is Orientation.DIRECTED:
        nx_graph: Union[nx.MultiGraph, nx.MultiDiGraph] = nx.MultiDiGraph()
    else:
        nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(graph.vertices())

    for e in graph.edges():
        u, v = graph.endvertices(e)
        key: Optional[Any] = getattr(e, "index", None)
        nx_graph.add_edge(u, v, key=key, **{edge_attr: e})
    return nx_graph


def from_networkx(
    G: NxGraph,
    *,
    vertex_width: Optional[IdWidth] = None,
    edge_width: Optional[IdWidth] = None,
) -> Tuple[StaticGraph, NodeMap]:
    """Convert a NetworkX graph to a ``StaticGraph``.

    Node names are sorted by ``str`` for deterministic vertex ids. The
    orientation follows ``G.is_directed()``; parallel edges of multigraphs are
    kept.

    Args:
        G: NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        vertex_width: Vertex id width for the new graph.
        edge_width: Edge id width for the new graph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        CapacityExceededError: If G does not fit the requested widths.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(
            f"Expected NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    orientation = Orientation.DIRECTED if G.is_directed() else Orientation.UNDIRECTED

    builder = StaticGraph.builder(
        len(node_map),
        G.number_of_edges(),
        vertex_width=vertex_width,
        edge_width=edge_width,
        orientation=orientation,
    )
    for u, v in G.edges():
        builder.add_edge(node_map.to_index[u], node_map.to_index[v])
    return builder.finalize(), node_map
