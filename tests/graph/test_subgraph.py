import random

import pytest

from fastgraph.errors import InvalidArgumentError, UnsupportedError
from fastgraph.graph.subgraph import (
    Subgraph,
    edge_induced_subgraph,
    induced_subgraph,
    spanning_subgraph,
)
from fastgraph.types.base import Orientation


def inc_set(g, v):
    return set(g.inc_edges(v))


def test_spanning_subgraph(g5, g5_edges):
    _, e02, e12, _ = g5_edges
    s = g5.spanning_subgraph([e02, e12])

    assert isinstance(s, Subgraph)
    assert s.base is g5
    assert list(s.vertices()) == [0, 1, 2, 3, 4]
    assert set(s.edges()) == {e02, e12}
    assert inc_set(s, 0) == {e02}
    assert inc_set(s, 1) == {e12}
    assert inc_set(s, 2) == {e02, e12}
    assert inc_set(s, 3) == set()
    assert inc_set(s, 4) == set()
    assert s.degree(3) == 0


def test_spanning_subgraph_incidence_directions(g5, g5_edges):
    _, e02, e12, _ = g5_edges
    s = spanning_subgraph(g5, [e02, e12])
    assert [e.raw for e in s.inc_edges(0)] == [e02.raw]
    assert [e.raw for e in s.inc_edges(2)] == [e02.raw ^ 1, e12.raw ^ 1]
    assert list(s.neighbors(2)) == [0, 1]


def test_edge_induced_subgraph(g5, g5_edges):
    e01, e02, _, _ = g5_edges
    s = g5.edge_induced_subgraph([e01, e02])

    assert set(s.vertices()) == {0, 1, 2}
    assert s.num_vertices == 3
    assert set(s.edges()) == {e01, e02}
    assert inc_set(s, 0) == {e01, e02}
    assert inc_set(s, 1) == {e01}
    assert inc_set(s, 2) == {e02}


def test_edge_induced_subgraph_keeps_first_seen_order(g5, g5_edges):
    e01, _, e12, e34 = g5_edges
    s = edge_induced_subgraph(g5, [e34, e12, e01])
    assert list(s.vertices()) == [3, 4, 1, 2, 0]


def test_induced_subgraph(g5, g5_edges):
    e01, e02, e12, _ = g5_edges
    s = g5.induced_subgraph([0, 1, 2])

    assert set(s.vertices()) == {0, 1, 2}
    assert set(s.edges()) == {e01, e02, e12}
    assert s.num_edges == 3
    assert inc_set(s, 0) == {e01, e02}
    assert inc_set(s, 1) == {e01, e12}
    assert inc_set(s, 2) == {e02, e12}


def test_induced_subgraph_drops_crossing_edges(g5, g5_edges):
    s = induced_subgraph(g5, [2, 3, 4])
    assert list(s.edges()) == [g5_edges[3]]
    assert s.degree(2) == 0
    assert list(s.neighbors(3)) == [4]


def test_induced_subgraph_discovery_order(g5, g5_edges):
    e01, e02, e12, _ = g5_edges
    s = g5.induced_subgraph([2, 0, 1])
    # Scanning vertex 2 first finds e02 and e12 from their target side
    assert list(s.edges()) == [e02, e12, e01]
    assert [e.raw for e in s.edges()] == [e02.raw ^ 1, e12.raw ^ 1, e01.raw]


def test_induced_subgraph_with_repeated_vertex(g5):
    s = g5.induced_subgraph([0, 1, 0])
    assert list(s.vertices()) == [0, 1, 0]
    assert s.num_edges == 1
    assert s.degree(0) == 1
    assert s.degree(1) == 1


def test_edge_semantics_delegate_to_base(g5, g5_edges):
    s = g5.induced_subgraph([0, 1, 2])
    for e in g5_edges[:3]:
        assert s.endvertices(e) == g5.endvertices(e)
        assert s.reverse(e).raw == g5.reverse(e).raw
        u, v = g5.endvertices(e)
        assert s.opposite(u, e) == v
    with pytest.raises(InvalidArgumentError):
        s.opposite(4, g5_edges[0])


def test_props_are_sized_to_base_graph(g5, g5_edges):
    s = g5.edge_induced_subgraph(g5_edges[:1])
    assert s.num_vertices == 2
    assert s.num_edges == 1
    assert len(s.vertex_prop(False)) == g5.num_vertices
    assert len(s.edge_prop(0)) == g5.num_edges
    assert len(s.vertex_array(0)) == g5.num_vertices
    assert len(s.edge_array(0)) == g5.num_edges


def test_nested_subgraph(g5, g5_edges):
    outer = g5.induced_subgraph([0, 1, 2])
    inner = outer.spanning_subgraph([g5_edges[0]])
    assert inner.base is outer
    assert list(inner.vertices()) == [0, 1, 2]
    assert list(inner.edges()) == [g5_edges[0]]
    assert inner.degree(2) == 0
    assert len(inner.vertex_prop(0)) == g5.num_vertices


def test_subgraph_of_directed_graph(dg5):
    e01, e02, e12, e34 = list(dg5.edges())

    s = dg5.spanning_subgraph([e02, e12])
    assert s.orientation is Orientation.DIRECTED
    assert list(s.inc_edges(0)) == [e02]
    assert list(s.inc_edges(1)) == [e12]
    assert list(s.inc_edges(2)) == []
    with pytest.raises(UnsupportedError):
        s.reverse(e02)

    induced = dg5.induced_subgraph([0, 1])
    assert list(induced.edges()) == [e01]
    assert induced.degree(0) == 1
    assert induced.degree(1) == 0

    edge_induced = dg5.edge_induced_subgraph([e34])
    assert list(edge_induced.vertices()) == [3, 4]
    assert edge_induced.degree(4) == 0


def test_empty_subgraphs(g5):
    s = g5.edge_induced_subgraph([])
    assert s.num_vertices == 0
    assert s.num_edges == 0
    rng = random.Random(0)
    with pytest.raises(InvalidArgumentError):
        s.choose_vertex(rng)
    with pytest.raises(InvalidArgumentError):
        s.choose_edge(rng)

    s = g5.induced_subgraph([])
    assert list(s.edges()) == []


def test_subgraph_shares_base(g5, g5_edges):
    s1 = g5.induced_subgraph([0, 1])
    s2 = g5.induced_subgraph([1, 2])
    assert s1.base is s2.base is g5
    assert list(s1.edges()) == [g5_edges[0]]
    assert list(s2.edges()) == [g5_edges[2]]


def test_choose_inc_edge_on_subgraph(g5, g5_edges):
    s = g5.spanning_subgraph(g5_edges[1:3])
    rng = random.Random(3)
    for _ in range(20):
        assert s.choose_inc_edge(rng, 2) in {g5_edges[1], g5_edges[2]}
    with pytest.raises(InvalidArgumentError):
        s.choose_inc_edge(rng, 3)
