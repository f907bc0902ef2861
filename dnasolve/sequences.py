"""Basic sequence helpers: FASTA reads, Hamming distance, complements, codons."""

from __future__ import annotations

import os

MAX_READS = 1000

_COMPLEMENT = str.maketrans("ACGT", "TGCA")
_TRANSCRIBE = str.maketrans("T", "U")

_AMINO_CODONS: dict[str, tuple[str, ...]] = {
    "F": ("UUU", "UUC"),
    "L": ("UUA", "UUG", "CUU", "CUC", "CUA", "CUG"),
    "S": ("UCU", "UCC", "UCA", "UCG", "AGU", "AGC"),
    "Y": ("UAU", "UAC"),
    "*": ("UAA", "UAG", "UGA"),
    "C": ("UGU", "UGC"),
    "W": ("UGG",),
    "P": ("CCU", "CCC", "CCA", "CCG"),
    "H": ("CAU", "CAC"),
    "Q": ("CAA", "CAG"),
    "R": ("CGU", "CGC", "CGA", "CGG", "AGA", "AGG"),
    "V": ("GUU", "GUC", "GUA", "GUG"),
    "A": ("GCU", "GCC", "GCA", "GCG"),
    "D": ("GAU", "GAC"),
    "E": ("GAA", "GAG"),
    "G": ("GGU", "GGC", "GGA", "GGG"),
    "I": ("AUU", "AUC", "AUA"),
    "M": ("AUG",),
    "T": ("ACU", "ACC", "ACA", "ACG"),
    "N": ("AAU", "AAC"),
    "K": ("AAA", "AAG"),
}

STOP = "Stop"


def read_fasta_reads(path: str | os.PathLike[str]) -> list[str]:
    """Return every non-header line of a FASTA file, at most ``MAX_READS`` of them."""
    reads: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if len(reads) >= MAX_READS:
                break
            if line.startswith(">"):
                continue
            reads.append(line.rstrip("\n"))
    return reads


def hamming(seq1: str, seq2: str) -> int:
    """Count mismatching positions over the length of the shorter sequence."""
    return sum(a != b for a, b in zip(seq1, seq2))


def complement(seq: str) -> str:
    """Swap A/T and C/G; other characters are kept."""
    return seq.translate(_COMPLEMENT)


def reverse_complement(seq: str) -> str:
    """Return the reverse complement of a DNA sequence."""
    return complement(seq)[::-1]


def transcribe(seq: str) -> str:
    """Turn DNA into RNA by replacing T with U."""
    return seq.translate(_TRANSCRIBE)


def codon_table() -> dict[str, str]:
    """Return the RNA codon table, codon to one-letter amino acid or ``"Stop"``."""
    return {
        codon: STOP if amino == "*" else amino
        for amino, codons in _AMINO_CODONS.items()
        for codon in codons
    }


def amino_to_codons() -> dict[str, tuple[str, ...]]:
    """Return each amino acid's codons; the stop codons are under ``"*"``."""
    return dict(_AMINO_CODONS)