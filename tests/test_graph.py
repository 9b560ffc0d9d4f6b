import pytest

from treegraph.graph import (
    INFINITY,
    AdjacencyListGraph,
    Edge,
    Graph,
    VertexCost,
    WeightedAdjacencyListGraph,
    WeightedGraph,
)


def _write(tmp_path, text, name="g.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_new_graph_has_no_edges():
    g = Graph(3)
    assert len(g) == 3
    assert all(not g[i][j] for i in range(3) for j in range(3))


def test_graph_is_directed_tracks_symmetry():
    g = Graph(3)
    assert g.is_directed() is False
    g[0][1] = True
    assert g.is_directed() is True
    g[1][0] = True
    assert g.is_directed() is False


def test_graph_from_file(tmp_path):
    path = _write(tmp_path, "3\n0: 1 2\n2: 0\n")
    g = Graph.from_file(path)
    edges = {(i, j) for i in range(3) for j in range(3) if g[i][j]}
    assert edges == {(0, 1), (0, 2), (2, 0)}


def test_graph_from_file_stops_at_garbage_line(tmp_path):
    path = _write(tmp_path, "3\n0: 1\nend\n1: 2\n")
    g = Graph.from_file(path)
    assert g[0][1] is True
    assert g[1][2] is False


def test_graph_from_file_rejects_bad_vertex(tmp_path):
    path = _write(tmp_path, "2\n0: 5\n")
    with pytest.raises(ValueError):
        Graph.from_file(path)


def test_graph_str_exact():
    g = Graph(2)
    g[0][1] = True
    assert str(g) == "2 vertices\n     0  1\n  0  0  1\n  1  0  0\n"


def test_weighted_graph_starts_infinite():
    w = WeightedGraph(2)
    assert w[0][0] == INFINITY
    assert w[1][0] == INFINITY
    assert WeightedGraph.INFINITY == INFINITY


def test_weighted_graph_from_file(tmp_path):
    path = _write(tmp_path, "2\n0 3\n7 0\n")
    w = WeightedGraph.from_file(path)
    assert [w[0], w[1]] == [[0, 3], [7, 0]]
    assert w.is_directed() is True


def test_weighted_graph_from_file_reads_infinity(tmp_path):
    path = _write(tmp_path, "2\n0 inf\ninf 0\n")
    w = WeightedGraph.from_file(path)
    assert w[0][1] == INFINITY
    assert w.is_directed() is False


def test_weighted_graph_from_file_too_short(tmp_path):
    path = _write(tmp_path, "2\n0 1 1\n")
    with pytest.raises(ValueError):
        WeightedGraph.from_file(path)


def test_weighted_from_graph_uses_unit_costs():
    g = Graph(2)
    g[0][1] = True
    w = WeightedGraph.from_graph(g)
    assert w[0][1] == 1
    assert w[1][0] == INFINITY
    assert w[0][0] == INFINITY


def test_graph_weighted_round_trip():
    g = Graph(3)
    g[0][2] = True
    g[2][1] = True
    back = Graph.from_weighted(WeightedGraph.from_graph(g))
    assert [back[i] for i in range(3)] == [g[i] for i in range(3)]


def test_edge_orders_by_cost():
    edges = [Edge(0, 1, 9), Edge(2, 3, 1), Edge(1, 2, 4)]
    assert [e.cost for e in sorted(edges)] == [1, 4, 9]
    assert not Edge(0, 1, 4) < Edge(5, 6, 4)


def test_vertex_cost_equality_by_vertex():
    assert VertexCost(3, 10) == VertexCost(3, 99)
    assert not VertexCost(3, 10) == VertexCost(4, 10)


def test_adjacency_list_from_file(tmp_path):
    path = _write(tmp_path, "4\n0: 3 1\n2: 2\n")
    g = AdjacencyListGraph.from_file(path)
    assert len(g) == 4
    assert g.adjacent(0) == [3, 1]
    assert g.adjacent(1) == []
    assert g.adjacent(2) == [2]


def test_adjacency_list_str_round_trip(tmp_path):
    g = AdjacencyListGraph(4)
    g.adjacent(0).extend([1, 3])
    g.adjacent(3).append(2)
    text = str(g)
    assert text.splitlines()[0] == "4 vertices"
    back = AdjacencyListGraph.from_file(_write(tmp_path, text.replace(" vertices", "")))
    assert [back.adjacent(v) for v in range(4)] == [g.adjacent(v) for v in range(4)]


def test_weighted_adjacency_list_from_file(tmp_path):
    path = _write(tmp_path, "3\n0: 1 5 2 7\n1: 2\n")
    g = WeightedAdjacencyListGraph.from_file(path)
    assert [(e.vertex, e.cost) for e in g.adjacent(0)] == [(1, 5), (2, 7)]
    assert g.adjacent(1) == []


def test_weighted_adjacency_list_str_round_trip(tmp_path):
    g = WeightedAdjacencyListGraph(3)
    g.adjacent(1).append(VertexCost(0, 4))
    g.adjacent(1).append(VertexCost(2, 2.5))
    text = str(g).replace(" vertices", "")
    back = WeightedAdjacencyListGraph.from_file(_write(tmp_path, text))
    pairs = [[(e.vertex, e.cost) for e in back.adjacent(v)] for v in range(3)]
    expected = [[(e.vertex, e.cost) for e in g.adjacent(v)] for v in range(3)]
    assert pairs == expected


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)
    with pytest.raises(ValueError):
        WeightedGraph(-1)