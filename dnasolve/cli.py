"""Command-line entry point running the sequence puzzles on input files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from dnasolve.analysis import highest_gc
from dnasolve.assembly import overlap_pairs
from dnasolve.combinatorics import MAX_PERMUTATION_SIZE, heap_permutations
from dnasolve.fasta import parse_fasta
from dnasolve.orf import candidate_proteins
from dnasolve.sequences import reverse_complement


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _revc(args: argparse.Namespace) -> int:
    original = _read(args.path).strip()
    print(f"Original string: {original}")
    print(f"Complemented and reversed string: {reverse_complement(original)}")
    return 0


def _gc(args: argparse.Namespace) -> int:
    identifier, percent = highest_gc(parse_fasta(_read(args.path)))
    if identifier is None:
        print("no sequence with any GC content", file=sys.stderr)
        return 1
    print(identifier)
    print(f"{percent:.6f}")
    return 0


def _perm(args: argparse.Namespace) -> int:
    try:
        permutations = list(heap_permutations(args.n))
    except ValueError:
        print(f"Invalid input. n must be between 1 and {MAX_PERMUTATION_SIZE}.")
        return 1
    for permutation in permutations:
        print("".join(f"{item} " for item in permutation))
    print(len(permutations))
    return 0


def _orf(args: argparse.Namespace) -> int:
    records = parse_fasta(_read(args.path))
    if not records:
        print("no FASTA record found", file=sys.stderr)
        return 1
    # The last record in the file is the one examined.
    sequence = list(records.values())[-1]
    for proteins in candidate_proteins(sequence):
        for protein in proteins:
            print(protein)
        print()
    return 0


def _grph(args: argparse.Namespace) -> int:
    for first, second in overlap_pairs(parse_fasta(_read(args.path)), args.k):
        print(f"{first} {second}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dnasolve", description="Solve sequence analysis puzzles."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    revc = commands.add_parser("revc", help="reverse complement of a DNA string")
    revc.add_argument("path", nargs="?", default="rosalind_revc.txt")
    revc.set_defaults(handler=_revc)

    gc = commands.add_parser("gc", help="FASTA record with the highest GC content")
    gc.add_argument("path", nargs="?", default="rosalind_gc.txt")
    gc.set_defaults(handler=_gc)

    perm = commands.add_parser("perm", help="all permutations of 1..n")
    perm.add_argument("n", type=int)
    perm.set_defaults(handler=_perm)

    orf = commands.add_parser("orf", help="proteins from open reading frames")
    orf.add_argument("path", nargs="?", default="ss.txt")
    orf.set_defaults(handler=_orf)

    grph = commands.add_parser("grph", help="overlap graph of FASTA records")
    grph.add_argument("path", nargs="?", default="rosalind_grph.txt")
    grph.add_argument("-k", type=int, default=3)
    grph.set_defaults(handler=_grph)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one puzzle command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except OSError as exc:
        print(f"Could not open file: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())