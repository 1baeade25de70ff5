"""Shared graph fixtures.

Most tests use the same small graph::

    0 ─── 1      3 ─── 4
     \\   /
      \\ /
       2

with edges added in the order (0,1), (0,2), (1,2), (3,4).
"""

from __future__ import annotations

import pytest

from fastgraph.graph.static import StaticGraph
from fastgraph.types.base import IdWidth, Orientation

EDGES5 = [(0, 1), (0, 2), (1, 2), (3, 4)]


@pytest.fixture
def g5() -> StaticGraph:
    return StaticGraph.from_edges(5, EDGES5)


@pytest.fixture
def g5_edges(g5):
    """Edges of ``g5`` in insertion order: e01, e02, e12, e34."""
    return list(g5.edges())


@pytest.fixture
def dg5() -> StaticGraph:
    # Directed: 0→1, 0→2, 1→2, 3→4
    return StaticGraph.from_edges(5, EDGES5, orientation=Orientation.DIRECTED)


def _graph_kinds():
    def static(g):
        return g

    def u8_widths(g):
        return StaticGraph.from_edges(
            5, EDGES5, vertex_width=IdWidth.U8, edge_width=IdWidth.U8
        )

    def spanning(g):
        return g.spanning_subgraph(list(g.edges())[1:])

    def edge_induced(g):
        return g.edge_induced_subgraph(list(g.edges())[:3])

    def induced(g):
        return g.induced_subgraph([0, 1, 2])

    def nested(g):
        return g.spanning_subgraph(list(g.edges())).induced_subgraph([2, 1, 0])

    return {
        "static": static,
        "static_u8": u8_widths,
        "spanning": spanning,
        "edge_induced": edge_induced,
        "induced": induced,
        "nested": nested,
    }


GRAPH_KINDS = _graph_kinds()


@pytest.fixture(params=sorted(GRAPH_KINDS))
def any_graph(request, g5):
    """Every undirected graph kind built from ``g5``."""
    return GRAPH_KINDS[request.param](g5)
