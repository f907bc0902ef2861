import pytest

from dnasolve.analysis import translate
from dnasolve.orf import candidate_proteins, proteins_from_orfs, reverse_palindromes
from dnasolve.sequences import reverse_complement


def test_single_orf_matches_translation():
    body = "AUGGCCAAAUUU"
    assert proteins_from_orfs(body + "UAA") == [translate(body)]


def test_nested_start_codons_each_give_a_protein():
    assert proteins_from_orfs("AUGAUGUAA") == sorted({translate("AUGAUG"), translate("AUG")})


def test_duplicate_proteins_reported_once():
    assert proteins_from_orfs("AUGUAAAUGUAA") == [translate("AUG")]


def test_frame_without_stop_gives_nothing():
    assert proteins_from_orfs("AUGGCCAAA") == []


def test_short_rna_gives_nothing():
    assert proteins_from_orfs("AU") == []


def test_partial_codon_warns():
    with pytest.warns(UserWarning):
        result = proteins_from_orfs("AUGGC")
    assert result == []


def test_proteins_sorted_and_start_with_methionine():
    rna = "CCAUGGGAUGCUAGAUGAAAUGAUUUAGGCAUGUUU"
    proteins = proteins_from_orfs(rna)
    assert proteins
    assert proteins == sorted(set(proteins))
    assert all(p.startswith("M") for p in proteins)


def test_candidate_proteins_strips_whitespace():
    assert candidate_proteins("ATGGCC\nTAA\n") == ([translate("AUGGCC")], [])


def test_candidate_proteins_strand_symmetry():
    dna = "AGCCATGTAGCTAACTCAGGTTACATGGGGATGACCCCGCG"
    forward, backward = candidate_proteins(dna)
    assert candidate_proteins(reverse_complement(dna)) == (backward, forward)


def test_reverse_palindromes_sample():
    assert reverse_palindromes("TCAATGCATGCGGGTCTATATGCAT") == [
        (4, 6), (5, 4), (6, 6), (7, 4), (17, 4), (18, 4), (20, 6), (21, 4),
    ]


def test_reverse_palindromes_are_palindromic():
    seq = "GAATTCGCGCATATGGATCCTTAA"
    hits = reverse_palindromes(seq)
    assert hits
    for position, length in hits:
        piece = seq[position - 1:position - 1 + length]
        assert len(piece) == length
        assert 4 <= length <= 12
        assert piece == reverse_complement(piece)


def test_reverse_palindromes_none():
    assert reverse_palindromes("AAAAAAAA") == []