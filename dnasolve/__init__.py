"""Sequence analysis toolkit with the trees and graph it builds on."""

__version__ = "0.1.0"

__all__ = [
    "analysis",
    "assembly",
    "bstree",
    "cli",
    "combinatorics",
    "fasta",
    "glycosylation",
    "graph",
    "orf",
    "rbtree",
    "sequences",
]