"""Read correction, overlap graphs and superstring assembly."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from dnasolve.graph import Graph
from dnasolve.sequences import hamming, reverse_complement


def find_corrections(reads: Sequence[str]) -> list[tuple[str, str]]:
    """Return ``(wrong, right)`` pairs for reads that look like sequencing errors.

    A read counts as correct when it, or its reverse complement, turns up
    again later in the list. Each read that does not is compared with the
    correct reads in order, and the first correct read or reverse complement
    exactly one mismatch away is taken as its correction. Reads with no such
    neighbour are left out.
    """
    reads = list(reads)
    counts = []
    for i, read in enumerate(reads):
        rc = reverse_complement(read)
        counts.append(1 + sum(other in (read, rc) for other in reads[i + 1:]))

    corrections: list[tuple[str, str]] = []
    for i, read in enumerate(reads):
        if counts[i] != 1:
            continue
        for j, (other, count) in enumerate(zip(reads, counts)):
            if j == i or count <= 1:
                continue
            if hamming(read, other) == 1:
                corrections.append((read, other))
                break
            rc = reverse_complement(other)
            if hamming(read, rc) == 1:
                corrections.append((read, rc))
                break
    return corrections


def _ends_match(seq1: str, seq2: str, k: int) -> bool:
    return seq1[len(seq1) - k:] == seq2[:k]


def overlap_pairs(records: Mapping[str, str], k: int = 3) -> list[tuple[str, str]]:
    """Return the edges of the overlap graph of order ``k``.

    A pair ``(a, b)`` of distinct identifiers is listed when the last ``k``
    bases of ``a`` equal the first ``k`` of ``b``. A pair in which either
    sequence is shorter than ``k`` is listed as well. Pairs come in the
    order of ``records``.
    """
    items = list(records.items())
    return [
        (first, second)
        for first, seq1 in items
        for second, seq2 in items
        if first != second
        and (len(seq1) < k or len(seq2) < k or _ends_match(seq1, seq2, k))
    ]


def overlap(s1: str, s2: str) -> int:
    """Length of the longest suffix of ``s1`` that is a prefix of ``s2``."""
    best = 0
    for length in range(1, min(len(s1), len(s2)) + 1):
        if s1.endswith(s2[:length]):
            best = length
    return best


def merge(s1: str, s2: str) -> str:
    """Join ``s1`` and ``s2``, writing their overlap only once."""
    return s1 + s2[overlap(s1, s2):]


def shortest_superstring(reads: Iterable[str]) -> str:
    """Greedily merge the pair of reads with the largest overlap until one is left.

    Ties go to the first pair found scanning ``(i, j)`` in order. The merged
    read goes to the end of the list.
    """
    pool = list(reads)
    if not pool:
        raise ValueError("no reads to assemble")
    while len(pool) > 1:
        best = -1
        best_pair = (0, 1)
        for i, first in enumerate(pool):
            for j, second in enumerate(pool):
                if i == j:
                    continue
                length = overlap(first, second)
                if length > best:
                    best, best_pair = length, (i, j)
        i, j = best_pair
        merged = merge(pool[i], pool[j])
        pool = [read for n, read in enumerate(pool) if n not in best_pair] + [merged]
    return pool[0]


def find_hamiltonian_path(graph: Graph) -> list[int] | None:
    """Walk greedily from node 0 along the first unvisited successor.

    Return the node order if the walk visits every node, otherwise None.
    """
    if len(graph) == 0:
        return []
    path = [0]
    visited = {0}
    current = 0
    while len(path) < len(graph):
        following = next(
            (t for t in graph.successors(current) if t not in visited), None
        )
        if following is None:
            return None
        path.append(following)
        visited.add(following)
        current = following
    return path


def _has_overlap(seq1: str, seq2: str, k: int) -> bool:
    if len(seq1) < k or len(seq2) < k:
        return False
    return _ends_match(seq1, seq2, k)


def superstring_from_graph(records: Mapping[str, str]) -> str:
    """Assemble reads that overlap by half their length through an overlap graph.

    Each sequence becomes a node; an edge joins two sequences when the
    second begins with the last half of the first. A greedy Hamiltonian path
    from the first sequence gives the assembly order. ValueError is raised
    when there are no records or no such path exists.
    """
    sequences = list(records.values())
    if not sequences:
        raise ValueError("no sequences to assemble")
    graph = Graph()
    for seq in sequences:
        graph.add_node(seq)
    for u, seq1 in enumerate(sequences):
        for v, seq2 in enumerate(sequences):
            if u != v and _has_overlap(seq1, seq2, len(seq1) // 2):
                graph.add_edge(u, v)
    path = find_hamiltonian_path(graph)
    if path is None:
        raise ValueError("no Hamiltonian path through the overlap graph")
    superstring = graph.node_data(path[0])
    for node in path[1:]:
        following = graph.node_data(node)
        superstring += following[len(following) // 2:]
    return superstring