"""fastgraph: generic graph representation and manipulation library.

Algorithms written against the `Graph` capability interface run unmodified
over every representation: the compact `StaticGraph`, subgraph views derived
from any graph, and future layouts.

Primary API:
    StaticGraph, StaticGraphBuilder - Immutable array-backed graph and builder
    Graph - Capability interface every representation implements
    PropertyMap - Dense per-vertex/per-edge storage
    Subgraph - Filtered read-only view of a base graph
    UnionFind - Disjoint sets over a graph's vertices

Example:
    from fastgraph import StaticGraph

    g = StaticGraph.from_edges(5, [(0, 1), (0, 2), (1, 2), (3, 4)])
    sub = g.induced_subgraph([0, 1, 2])

    ds = g.new_unionfind()
    for e in g.edges():
        ds.union(*g.endvertices(e))
    assert ds.num_sets == 2
"""

from __future__ import annotations

from fastgraph import logging
from fastgraph._version import __version__
from fastgraph.config import GRAPH_CONFIG, GraphConfig
from fastgraph.errors import (
    CapacityExceededError,
    GraphError,
    InvalidArgumentError,
    UnsupportedError,
)
from fastgraph.graph.base import Graph
from fastgraph.graph.convert import NodeMap, from_networkx, to_networkx
from fastgraph.graph.props import PropertyMap
from fastgraph.graph.static import StaticEdge, StaticGraph, StaticGraphBuilder
from fastgraph.graph.subgraph import (
    Subgraph,
    edge_induced_subgraph,
    induced_subgraph,
    spanning_subgraph,
)
from fastgraph.types.base import IdWidth, Orientation
from fastgraph.types.optional import OptionalId
from fastgraph.unionfind import UnionFind, new_unionfind

__all__ = [
    # Version
    "__version__",
    # Graphs
    "Graph",
    "StaticGraph",
    "StaticGraphBuilder",
    "StaticEdge",
    "Subgraph",
    "spanning_subgraph",
    "edge_induced_subgraph",
    "induced_subgraph",
    # Properties and derived structures
    "PropertyMap",
    "UnionFind",
    "new_unionfind",
    # Types
    "IdWidth",
    "Orientation",
    "OptionalId",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "UnsupportedError",
    "CapacityExceededError",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
