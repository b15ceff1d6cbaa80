import itertools

import networkx as nx
import pytest

import kruskal
from graphgen import generate_graph
from kruskal import Edge, UnionFind, build_mst, total_weight
from nx_utils import to_networkx
from replacement import EXAMPLE_EDGES, EXAMPLE_VERTICES


def brute_force_mst_weight(n, edges):
    best = None
    for subset in itertools.combinations(edges, n - 1):
        uf = UnionFind(n)
        if all(uf.unite(e.u, e.v) for e in subset):
            w = total_weight(subset)
            if best is None or w < best:
                best = w
    return best


def test_find_initially_returns_self():
    uf = UnionFind(4)
    for i in range(4):
        assert uf.find(i) == i


def test_unite_reports_merges():
    uf = UnionFind(3)
    assert uf.unite(0, 1) is True
    assert uf.unite(1, 0) is False
    assert uf.connected(0, 1)
    assert not uf.connected(0, 2)


def test_union_by_rank():
    uf = UnionFind(3)
    uf.unite(0, 1)
    assert uf.find(1) == 0
    assert uf.ranks[0] == 1
    # lower rank root goes under the higher rank root
    uf.unite(2, 1)
    assert uf.find(2) == 0
    assert uf.ranks[0] == 1


def test_path_compression():
    uf = UnionFind(4)
    uf.vertices = [0, 0, 1, 2]
    assert uf.find(3) == 0
    assert uf.vertices == [0, 0, 0, 0]


@pytest.mark.parametrize('index', [-1, 4, 100])
def test_find_out_of_range(index):
    uf = UnionFind(4)
    with pytest.raises(IndexError):
        uf.find(index)


def test_edge_key_is_unordered():
    assert Edge(3, 1, 7).key == Edge(1, 3, 2).key == (1, 3)


def test_edge_from_line_and_str():
    edge = Edge.from_line('0 4 12\n')
    assert edge == Edge(0, 4, 12)
    assert str(edge) == '(0-4: 12)'


def test_example_mst():
    mst = build_mst(EXAMPLE_VERTICES, EXAMPLE_EDGES)
    assert mst == [Edge(0, 1, 2), Edge(1, 2, 3), Edge(1, 4, 5), Edge(0, 3, 6)]
    assert total_weight(mst) == 16


def test_build_mst_does_not_sort_input():
    edges = list(reversed(EXAMPLE_EDGES))
    before = list(edges)
    build_mst(EXAMPLE_VERTICES, edges)
    assert edges == before


def test_ties_keep_input_order():
    edges = [Edge(0, 1, 1), Edge(1, 2, 5), Edge(0, 2, 5)]
    assert build_mst(3, edges) == [Edge(0, 1, 1), Edge(1, 2, 5)]
    assert build_mst(3, [edges[0], edges[2], edges[1]]) == [Edge(0, 1, 1), Edge(0, 2, 5)]


def test_empty_edge_list():
    assert build_mst(3, []) == []


def test_disconnected_graph_gives_forest():
    edges = [Edge(0, 1, 4), Edge(2, 3, 1), Edge(3, 2, 6)]
    assert build_mst(5, edges) == [Edge(2, 3, 1), Edge(0, 1, 4)]


def test_self_loops_are_skipped():
    edges = [Edge(0, 0, 1), Edge(0, 1, 2)]
    assert build_mst(2, edges) == [Edge(0, 1, 2)]


@pytest.mark.parametrize('seed', range(8))
def test_mst_is_minimum(seed):
    n, edges = generate_graph(6, density=0.6, max_weight=20, seed=seed)
    mst = build_mst(n, edges)

    assert len(mst) == n - 1
    uf = UnionFind(n)
    assert all(uf.unite(e.u, e.v) for e in mst)

    assert total_weight(mst) == brute_force_mst_weight(n, edges)

    reference = nx.minimum_spanning_tree(to_networkx(n, edges))
    assert total_weight(mst) == reference.size(weight='weight')


def test_main_prints_sum(tmp_path, capsys):
    path = tmp_path / 'graph.txt'
    path.write_text('5 7\n' + ''.join(f'{e.u} {e.v} {e.weight}\n' for e in EXAMPLE_EDGES))

    assert kruskal.main([str(path)]) == 0
    assert 'Final MST sum: 16' in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert kruskal.main([str(tmp_path / 'missing.txt')]) == 1
