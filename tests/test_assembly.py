import pytest

from dnasolve.assembly import (
    find_corrections,
    find_hamiltonian_path,
    merge,
    overlap,
    overlap_pairs,
    shortest_superstring,
    superstring_from_graph,
)
from dnasolve.graph import Graph
from dnasolve.sequences import hamming

CORR_READS = [
    "TCATC", "TTCAT", "TCATC", "TGAAA", "GAGGA",
    "TTTCA", "ATCAA", "TTGAT", "TTTCC",
]


def test_find_corrections_sample():
    assert find_corrections(CORR_READS) == [
        ("TTCAT", "TTGAT"),
        ("GAGGA", "GATGA"),
        ("TTTCC", "TTTCA"),
    ]


def test_corrections_are_one_mismatch_away():
    corrections = find_corrections(CORR_READS)
    assert corrections
    for wrong, right in corrections:
        assert wrong in CORR_READS
        assert hamming(wrong, right) == 1


def test_no_corrections_without_close_reads():
    reads = ["ACGTA", "ACGTA", "TTTTG", "CAAAA"]
    assert find_corrections(reads) == []


def test_overlap_pairs_cycle():
    records = {"a": "AAATTT", "b": "TTTGGG", "c": "GGGAAA"}
    assert overlap_pairs(records, 3) == [("a", "b"), ("b", "c"), ("c", "a")]


def test_overlap_pairs_exclude_self():
    assert overlap_pairs({"x": "AAAAAA"}, 3) == []


def test_overlap_pairs_satisfy_suffix_prefix():
    records = {"r1": "ACGTTGCA", "r2": "GCAATGCC", "r3": "TGCCACGT", "r4": "CCCCCCCC"}
    for first, second in overlap_pairs(records, 3):
        assert records[first][-3:] == records[second][:3]


def test_overlap_length():
    shared = "CCTG"
    assert overlap("ATTAGA" + shared, shared + "CCGGAA") == len(shared)


def test_overlap_none():
    assert overlap("AAAA", "CCCC") == 0


def test_merge_writes_overlap_once():
    shared = "CCTG"
    assert merge("ATTAGA" + shared, shared + "CCGGAA") == "ATTAGA" + shared + "CCGGAA"


def test_shortest_superstring_sample():
    reads = ["ATTAGACCTG", "CCTGCCGGAA", "AGACCTGCCG", "GCCGGAATAC"]
    assert shortest_superstring(reads) == "ATTAGACCTGCCGGAATAC"


def test_shortest_superstring_contains_every_read():
    target = "GATTACAGGCTTAACCG"
    reads = [target[0:7], target[4:11], target[8:15], target[11:17]]
    result = shortest_superstring(reads)
    assert all(read in result for read in reads)
    assert len(result) <= sum(map(len, reads))


def test_shortest_superstring_single_read():
    assert shortest_superstring(["ACGT"]) == "ACGT"


def test_shortest_superstring_empty():
    with pytest.raises(ValueError):
        shortest_superstring([])


def test_hamiltonian_path_chain():
    graph = Graph()
    for label in "abcd":
        graph.add_node(label)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    assert find_hamiltonian_path(graph) == list(range(len(graph)))


def test_hamiltonian_path_missing():
    graph = Graph()
    graph.add_node("a")
    graph.add_node("b")
    graph.add_edge(1, 0)
    assert find_hamiltonian_path(graph) is None


def test_hamiltonian_path_visits_each_node_once():
    graph = Graph()
    for label in "abc":
        graph.add_node(label)
    graph.add_edge(0, 2)
    graph.add_edge(2, 0)
    graph.add_edge(2, 1)
    path = find_hamiltonian_path(graph)
    assert sorted(path) == list(range(len(graph)))
    assert path[0] == 0


def test_superstring_from_graph_rebuilds_target():
    target = "AACCGGTTACGTTGCA"
    records = {"r0": target[0:8], "r1": target[4:12], "r2": target[8:16]}
    assert superstring_from_graph(records) == target


def test_superstring_from_graph_single_record():
    assert superstring_from_graph({"only": "ACGTACGT"}) == "ACGTACGT"


def test_superstring_from_graph_no_path():
    with pytest.raises(ValueError):
        superstring_from_graph({"a": "AAAACCCC", "b": "GGGGTTTT"})


def test_superstring_from_graph_empty():
    with pytest.raises(ValueError):
        superstring_from_graph({})