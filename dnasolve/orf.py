"""Open reading frames and reverse palindromes."""

from __future__ import annotations

import warnings

from dnasolve.bstree import BinarySearchTree
from dnasolve.sequences import codon_table, reverse_complement, transcribe

START_CODON = "AUG"
STOP_CODONS = frozenset({"UAG", "UGA", "UAA"})

MIN_PALINDROME = 4
MAX_PALINDROME = 12


def proteins_from_orfs(rna: str) -> list[str]:
    """Return the distinct proteins of the open reading frames of ``rna``, sorted.

    A frame starts at ``AUG`` and ends at the first stop codon in the same
    frame; scanning then resumes one base after the start, so nested starts
    give their own proteins. A frame that reaches the end without a stop
    gives nothing. Codons that cannot be translated, such as a partial codon
    at the end, are skipped with a warning.
    """
    if len(rna) < 3:
        return []
    table = codon_table()
    found = BinarySearchTree()
    protein: list[str] = []
    in_orf = False
    start = 0
    pos = 0
    while pos < len(rna):
        codon = rna[pos:pos + 3]
        if not in_orf and codon == START_CODON:
            in_orf = True
            start = pos
        if not in_orf:
            pos += 1
            continue
        if codon in STOP_CODONS:
            in_orf = False
            found.add("".join(protein))
            protein = []
            pos = start + 1
            continue
        amino = table.get(codon)
        if amino is None:
            warnings.warn(f"unknown codon {codon!r}", stacklevel=2)
        else:
            protein.append(amino[0])
        pos += 3
    return list(found)


def candidate_proteins(dna: str) -> tuple[list[str], list[str]]:
    """Return the ORF proteins of a DNA strand and of its reverse complement.

    Whitespace in ``dna`` is ignored. Each list is sorted and free of
    duplicates; the first is for the strand as given.
    """
    seq = "".join(dna.split())
    forward = proteins_from_orfs(transcribe(seq))
    backward = proteins_from_orfs(transcribe(reverse_complement(seq)))
    return forward, backward


def reverse_palindromes(seq: str) -> list[tuple[int, int]]:
    """Return ``(position, length)`` of every reverse palindrome of length 4 to 12.

    Positions are 1-based; results are ordered by position, then length.
    """
    return [
        (start + 1, length)
        for start in range(len(seq))
        for length in range(MIN_PALINDROME, MAX_PALINDROME + 1)
        if start + length <= len(seq)
        and (piece := seq[start:start + length]) == reverse_complement(piece)
    ]