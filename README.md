# dnasolve

A small, dependency-free toolkit for everyday sequence problems: reading
FASTA files, counting nucleotides, GC content, transcription and
translation, open reading frames, reverse palindromes, read correction,
overlap graphs and shortest-superstring assembly. It also ships the
data structures some of these are built on: a binary search tree, a
red-black tree and a simple directed graph.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides a `dnasolve` command with five
subcommands. Each reads its input file from the current directory unless
a path is given.

```
dnasolve --help
```

| Command | Input (default) | Output |
|---|---|---|
| `dnasolve revc [PATH]` | a DNA string (`rosalind_revc.txt`) | the string and its reverse complement |
| `dnasolve gc [PATH]` | FASTA (`rosalind_gc.txt`) | identifier with the highest GC content, then the percentage to six decimals |
| `dnasolve perm N` | — | every permutation of 1..N (N from 1 to 7) in Heap's order, then their count |
| `dnasolve orf [PATH]` | FASTA (`ss.txt`) | sorted distinct ORF proteins of the last record, forward strand then reverse complement, each list followed by a blank line |
| `dnasolve grph [PATH] [-k K]` | FASTA (`rosalind_grph.txt`) | one `first second` line per edge of the overlap graph of order K (default 3) |

The command exits with status 1 when a file cannot be opened, when
`perm` is given an N out of range, when `gc` finds no sequence with any
G or C, or when `orf` finds no FASTA record.

The other analyses below are available from Python only.

## Library usage

### Sequences

```python
from dnasolve.sequences import (
    amino_to_codons, codon_table, complement, hamming,
    read_fasta_reads, reverse_complement, transcribe,
)

reverse_complement("AAAACCCGGT")                         # "ACCGGGTTTT"
hamming("GAGCCTACTAACGGGAT", "CATCGTAATGACGGCCT")        # 7
transcribe("GATGGAACTTGACTACGTAAATT")                    # T becomes U
codon_table()["UAA"]                                     # "Stop"
amino_to_codons()["M"]                                   # ("AUG",)
```

`read_fasta_reads(path)` returns the non-header lines of a FASTA file as a
list (at most 1000 of them).

### FASTA files

```python
from dnasolve.fasta import parse_fasta
from dnasolve.analysis import highest_gc

records = parse_fasta(">a\nGGCC\n>b\nATAT\nGC\n")
# {"a": "GGCC", "b": "ATATGC"}
highest_gc(records)                                       # ("a", 100.0)
```

`read_fasta(path)` does the same for a file. Sequence lines are joined
with newlines removed, and a repeated identifier keeps its last sequence.

### Analysis

```python
from dnasolve.analysis import (
    count_mrna_sources, count_nucleotides, find_motif,
    gc_content, protein_mass, translate,
)

count_nucleotides("AGCTTTTCATTCTGACTGCA")  # NucleotideCounts(a=..., c=..., g=..., t=...)
gc_content("GGAT")                         # 0.5
find_motif("GATATATGCATATACTT", "ATAT")    # [2, 4, 10]
translate("AUGGCCUAA")                     # "MAStop"
protein_mass("SKADYEK")                    # monoisotopic mass as a float
count_mrna_sources("MA", 1_000_000)        # 12
```

`translate` carries on past stop codons, writing `Stop` for each, and
raises `ValueError` on an unknown codon. `protein_mass` warns about and
skips characters it has no mass for. `count_mrna_sources` raises
`ValueError` for a character that is not an amino acid.

### Combinatorics

```python
from dnasolve.combinatorics import (
    dominant_probability, heap_permutations, mortal_rabbits, rabbit_population,
)

rabbit_population(5, 3)        # 19
mortal_rabbits(6, 3)           # rabbits living 3 months, after 6 months
dominant_probability(2, 2, 2)  # chance of a dominant-phenotype child
list(heap_permutations(3))     # all orderings of 1..3 by Heap's algorithm
```

### Assembly

```python
from dnasolve.assembly import (
    find_corrections, merge, overlap, overlap_pairs,
    shortest_superstring, superstring_from_graph,
)

overlap("ATTAG", "TAGGC")                            # 3
merge("ATTAG", "TAGGC")                              # "ATTAGGC"
shortest_superstring(["ATTAGACCTG", "CCTGCCGGAA", "AGACCTGCCG", "GCCGGAATAC"])
overlap_pairs({"a": "AAATTT", "b": "TTTCCC"}, 3)     # [("a", "b")]
find_corrections(reads)                              # (wrong read, corrected read) pairs
```

`superstring_from_graph(records)` builds a `Graph` whose edges join
sequences that begin with the last half of another, walks it greedily
with `find_hamiltonian_path`, and raises `ValueError` when no such walk
covers every sequence.

### Reading frames and palindromes

```python
from dnasolve.orf import candidate_proteins, proteins_from_orfs, reverse_palindromes

forward, backward = candidate_proteins(dna)  # sorted distinct ORF proteins per strand
proteins_from_orfs("AUGGCCUAA")              # ["MA"]
reverse_palindromes("TCAATGCATGCGGGTCTATATGCAT")  # (position, length), lengths 4 to 12
```

### N-glycosylation motif

```python
from dnasolve.glycosylation import motif_positions, motif_report

motif_positions("NKSANGTA")      # [1, 5] — 1-based positions of N{P}[ST]{P}
```

`motif_report(ids, fetch)` returns `(id, positions)` for each UniProt
identifier. `fetch` maps an identifier to FASTA text; by default it is
`fetch_uniprot_fasta`, which downloads the entry over HTTPS. An entry
that cannot be fetched is reported with no positions and a warning.

### Data structures

```python
from dnasolve.bstree import BinarySearchTree
from dnasolve.rbtree import RedBlackTree
from dnasolve.graph import Graph

words = BinarySearchTree(key=None)   # ordered set: equal values are kept once
for word in ["banana", "apple", "cherry"]:
    words.add(word)
list(words)                          # ["apple", "banana", "cherry"]
words.remove("banana")               # KeyError if absent

tree = RedBlackTree(key=None)        # balanced, keeps duplicates
for n in [5, 1, 5, 3]:
    tree.add(n)
list(tree), list(reversed(tree))     # [1, 3, 5, 5], [5, 5, 3, 1]

g = Graph()
a = g.add_node(100)
b = g.add_node(200)
g.add_edge(a, b, None)
print(g.format_adjacency_matrix())   # "0 1 \n0 0 \n"
```

Graph nodes are numbered by position; `delete_node` removes the node and
every edge touching it, and shifts later nodes down by one.