"""Single-sequence analyses: base counts, GC content, motifs, translation, masses."""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import NamedTuple

from dnasolve.sequences import amino_to_codons, codon_table

MRNA_MODULO = 1_000_000

MONOISOTOPIC_MASS: dict[str, float] = {
    "A": 71.03711,
    "C": 103.00919,
    "D": 115.02694,
    "E": 129.04259,
    "F": 147.06841,
    "G": 57.02146,
    "H": 137.05891,
    "I": 113.08406,
    "K": 128.09496,
    "L": 113.08406,
    "M": 131.04049,
    "N": 114.04293,
    "P": 97.05276,
    "Q": 128.05858,
    "R": 156.10111,
    "S": 87.03203,
    "T": 101.04768,
    "V": 99.06841,
    "W": 186.07931,
    "Y": 163.06333,
}

_STOP_CODON_CHOICES = 3


class NucleotideCounts(NamedTuple):
    """How many of each DNA base a sequence holds."""

    a: int
    c: int
    g: int
    t: int


def count_nucleotides(seq: str) -> NucleotideCounts:
    """Count A, C, G and T in ``seq``; other characters are ignored."""
    return NucleotideCounts(seq.count("A"), seq.count("C"), seq.count("G"), seq.count("T"))


def gc_content(seq: str) -> float:
    """Return the fraction of ``seq`` that is G or C."""
    if not seq:
        raise ValueError("GC content of an empty sequence is undefined")
    return sum(base in "GC" for base in seq) / len(seq)


def highest_gc(records: Mapping[str, str]) -> tuple[str | None, float]:
    """Return the identifier with the highest GC content and that content in percent.

    Records are visited in order and the first of equal contents wins. Empty
    sequences are passed over. If no record has any G or C the result is
    ``(None, 0.0)``.
    """
    best_id: str | None = None
    best = 0.0
    for identifier, seq in records.items():
        if not seq:
            continue
        content = gc_content(seq)
        if content > best:
            best_id, best = identifier, content
    return best_id, best * 100


def find_motif(text: str, motif: str) -> list[int]:
    """Return the 1-based start of every occurrence of ``motif`` in ``text``, overlaps included."""
    if not motif:
        raise ValueError("motif must not be empty")
    positions: list[int] = []
    found = text.find(motif)
    while found != -1:
        positions.append(found + 1)
        found = text.find(motif, found + 1)
    return positions


def translate(rna: str) -> str:
    """Translate every whole codon of ``rna`` through the codon table.

    Stop codons contribute the word ``Stop`` and translation carries on past
    them; a trailing partial codon is ignored. An unknown codon raises
    ValueError.
    """
    table = codon_table()
    pieces: list[str] = []
    for start in range(0, len(rna) - 2, 3):
        codon = rna[start:start + 3]
        try:
            pieces.append(table[codon])
        except KeyError:
            raise ValueError(f"unknown codon {codon!r} at position {start + 1}") from None
    return "".join(pieces)


def protein_mass(protein: str) -> float:
    """Return the summed monoisotopic mass of ``protein``.

    Whitespace is ignored; any other character without a mass is skipped
    with a warning.
    """
    total = 0.0
    for residue in protein:
        if residue.isspace():
            continue
        mass = MONOISOTOPIC_MASS.get(residue)
        if mass is None:
            warnings.warn(f"no mass known for {residue!r}", stacklevel=2)
            continue
        total += mass
    return total


def count_mrna_sources(protein: str, modulo: int = MRNA_MODULO) -> int:
    """Count the RNA strings that could encode ``protein``, modulo ``modulo``.

    The count includes the choice of stop codon at the end. A character that
    is not an amino acid raises ValueError.
    """
    choices = {amino: len(codons) for amino, codons in amino_to_codons().items()}
    number = 1
    for amino in protein:
        try:
            number = number * choices[amino] % modulo
        except KeyError:
            raise ValueError(f"invalid amino acid {amino!r}") from None
    return number * _STOP_CODON_CHOICES % modulo