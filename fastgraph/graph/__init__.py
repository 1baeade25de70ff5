"""Graph representations and the capability interface they share.

This package provides the abstract `Graph` contract, dense property maps,
the compact `StaticGraph` with its builder, subgraph views, and conversion
helpers for NetworkX (`convert`).
"""

from fastgraph.graph.base import Graph, RandomSource
from fastgraph.graph.props import PropertyMap
from fastgraph.graph.static import StaticEdge, StaticGraph, StaticGraphBuilder
from fastgraph.graph.subgraph import (
    Subgraph,
    edge_induced_subgraph,
    induced_subgraph,
    spanning_subgraph,
)

__all__ = [
    "Graph",
    "PropertyMap",
    "RandomSource",
    "StaticEdge",
    "StaticGraph",
    "StaticGraphBuilder",
    "Subgraph",
    "edge_induced_subgraph",
    "induced_subgraph",
    "spanning_subgraph",
]
