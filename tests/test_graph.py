import pytest

from dnasolve.graph import Edge, Graph


def _sample_graph():
    g = Graph()
    for value in (100, 200, 300, 400, 500):
        g.add_node(value)
    g.add_edge(0, 1)
    g.add_edge(1, 3)
    g.add_edge(1, 4)
    g.add_edge(2, 4)
    return g


def test_add_node_returns_sequential_indices():
    g = Graph()
    indices = [g.add_node(v) for v in ("a", "b", "c")]
    assert indices == list(range(3))
    assert len(g) == 3
    assert list(g) == ["a", "b", "c"]


def test_add_edge_rejects_unknown_nodes():
    g = Graph()
    g.add_node(1)
    with pytest.raises(IndexError):
        g.add_edge(0, 1)
    with pytest.raises(IndexError):
        g.add_edge(-1, 0)


def test_adjacency_matrix_matches_edges():
    g = _sample_graph()
    matrix = g.adjacency_matrix()
    assert len(matrix) == 5 and all(len(row) == 5 for row in matrix)
    ones = {(r, c) for r, row in enumerate(matrix) for c, cell in enumerate(row) if cell}
    assert ones == {(0, 1), (1, 3), (1, 4), (2, 4)}


def test_delete_node_shifts_indices():
    g = _sample_graph()
    g.delete_node(1)
    assert len(g) == 4
    assert list(g) == [100, 300, 400, 500]
    assert g.format_adjacency_matrix() == "0 0 0 0 \n0 0 0 1 \n0 0 0 0 \n0 0 0 0 \n"
    assert g.edges == (Edge(1, 3, None),)


def test_format_row_count_and_trailing_space():
    g = _sample_graph()
    lines = g.format_adjacency_matrix().splitlines()
    assert len(lines) == 5
    assert all(line.endswith(" ") for line in lines)
    assert lines[0].split() == ["0", "1", "0", "0", "0"]


def test_delete_edge_updates_successors():
    g = _sample_graph()
    g.delete_edge(1)
    assert g.successors(1) == [4]
    assert [(e.source, e.target) for e in g.edges] == [(0, 1), (1, 4), (2, 4)]


def test_delete_edge_out_of_range_is_ignored():
    g = _sample_graph()
    g.delete_edge(10)
    g.delete_edge(-1)
    assert len(g.edges) == 4


def test_delete_node_out_of_range_is_ignored():
    g = _sample_graph()
    g.delete_node(7)
    assert len(g) == 5


def test_node_data_is_copied():
    g = Graph()
    payload = ["x"]
    idx = g.add_node(payload)
    payload.append("y")
    assert g.node_data(idx) == ["x"]


def test_edge_data_is_stored():
    g = Graph()
    g.add_node(0)
    g.add_node(1)
    g.add_edge(0, 1, {"weight": 2})
    assert g.edges[0].data == {"weight": 2}


def test_empty_graph():
    g = Graph()
    assert g.adjacency_matrix() == []
    assert g.format_adjacency_matrix() == ""
    with pytest.raises(IndexError):
        g.successors(0)