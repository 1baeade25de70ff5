import numpy as np

from fastgraph.graph.static import StaticGraph
from fastgraph.unionfind import UnionFind, new_unionfind


def check_groups(ds, groups):
    for group in groups:
        for a in group:
            assert ds.in_same_set(group[0], a)


def test_unionfind_scenario():
    g = StaticGraph.from_edges(5)
    v = list(g.vertices())
    ds = g.new_unionfind()
    assert ds.num_sets == 5

    ds.union(v[0], v[2])
    check_groups(ds, [[v[0], v[2]]])
    ds.union(v[1], v[3])
    check_groups(ds, [[v[0], v[2]], [v[1], v[3]]])
    assert not ds.in_same_set(v[0], v[1])
    ds.union(v[2], v[4])
    check_groups(ds, [[v[0], v[2], v[4]], [v[1], v[3]]])
    ds.union(v[3], v[4])
    check_groups(ds, [[v[0], v[2], v[4], v[1], v[3]]])
    assert ds.num_sets == 1
    for a in v:
        for b in v:
            assert ds.in_same_set(a, b)


def test_union_reports_merge(g5):
    ds = new_unionfind(g5)
    assert isinstance(ds, UnionFind)
    assert ds.union(0, 1)
    assert not ds.union(1, 0)
    assert ds.num_sets == 4


def test_components_from_edges(g5):
    ds = g5.new_unionfind()
    for e in g5.edges():
        ds.union(*g5.endvertices(e))
    assert ds.num_sets == 2
    assert ds.in_same_set(0, 2)
    assert ds.in_same_set(3, 4)
    assert not ds.in_same_set(2, 3)


def test_union_by_rank():
    g = StaticGraph.from_edges(3)
    ds = g.new_unionfind()
    ds.union(0, 1)
    assert ds.find(1) == 0
    assert ds.rank[0] == 1
    # The lower-rank root goes under the higher-rank one
    ds.union(2, 0)
    assert ds.find(2) == 0
    assert ds.rank[0] == 1
    assert ds.rank.values.dtype == np.uint8


def test_find_halves_paths():
    g = StaticGraph.from_edges(5)
    ds = g.new_unionfind()
    for v in range(1, 5):
        ds.parent[v] = v - 1
    assert ds.find(4) == 0
    assert ds.parent[4] == 2
    assert ds.parent[2] == 0
    assert ds.find(4) == 0
    assert ds.parent[4] == 0


def test_reset_reuses_maps(g5):
    ds = g5.new_unionfind()
    parent, rank = ds.parent, ds.rank
    for e in g5.edges():
        ds.union(*g5.endvertices(e))
    ds.reset()
    assert ds.num_sets == 5
    assert ds.parent is parent
    assert ds.rank is rank
    assert not ds.in_same_set(0, 1)
    assert all(ds.rank[v] == 0 for v in g5.vertices())

    ds.union(3, 4)
    ds.reset(g5)
    assert not ds.in_same_set(3, 4)


def test_unionfind_over_subgraph(g5):
    sub = g5.induced_subgraph([0, 1, 2])
    ds = sub.new_unionfind()
    assert ds.num_sets == 3
    assert len(ds.parent) == g5.num_vertices
    for e in sub.edges():
        ds.union(*sub.endvertices(e))
    assert ds.num_sets == 1
    assert ds.in_same_set(0, 2)


def test_repeated_subgraph_vertices_count_once(g5):
    ds = g5.induced_subgraph([0, 1, 0]).new_unionfind()
    assert ds.num_sets == 2
    assert ds.union(0, 1)
    assert ds.num_sets == 1
    ds.reset()
    assert ds.num_sets == 2


def test_make_set_ignores_tracked_vertex(g5):
    ds = g5.new_unionfind()
    ds.union(0, 1)
    assert not ds.make_set(0)
    assert ds.num_sets == 4
    assert ds.in_same_set(0, 1)


def test_unionfind_on_empty_graph():
    ds = StaticGraph.from_edges(0).new_unionfind()
    assert ds.num_sets == 0
    ds.reset()
    assert ds.num_sets == 0
