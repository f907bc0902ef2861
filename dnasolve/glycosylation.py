"""Finding the N-glycosylation motif in proteins fetched by UniProt id."""

from __future__ import annotations

import re
import urllib.parse
import urllib.request
import warnings
from collections.abc import Callable, Iterable
from typing import Any

UNIPROT_FASTA_URL = "https://www.uniprot.org/uniprot/{}.fasta"
_USER_AGENT = "dnasolve/1.0"

_MOTIF = re.compile(r"N[^P][ST][^P]")
_MOTIF_LENGTH = 4


def motif_positions(sequence: str) -> list[int]:
    """Return the 1-based start of every N{P}[ST]{P} motif, overlaps included."""
    return [
        start + 1
        for start in range(len(sequence) - _MOTIF_LENGTH + 1)
        if _MOTIF.fullmatch(sequence, start, start + _MOTIF_LENGTH)
    ]


def fetch_uniprot_fasta(
    protein_id: str, opener: Callable[[urllib.request.Request], Any] | None = None
) -> str:
    """Download the FASTA text of a UniProt entry.

    ``opener`` is called with the request and must return a readable
    context manager; it defaults to ``urllib.request.urlopen``, which
    follows redirects. Network failures raise OSError.
    """
    opener = opener or urllib.request.urlopen
    url = UNIPROT_FASTA_URL.format(urllib.parse.quote(protein_id, safe=""))
    request = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT})
    with opener(request) as response:
        return response.read().decode("utf-8")


def sequence_from_fasta(text: str) -> str:
    """Return the sequence of a one-record FASTA text, without line breaks."""
    header_end = text.find("\n")
    if header_end == -1:
        raise ValueError("FASTA text has no line after its header")
    return "".join(text[header_end + 1:].split())


def motif_report(
    protein_ids: Iterable[str], fetch: Callable[[str], str] | None = None
) -> list[tuple[str, list[int]]]:
    """Return ``(id, motif positions)`` for each protein id, in order.

    Blank ids are skipped. An entry that cannot be fetched is reported with
    no positions and a warning.
    """
    fetch = fetch or fetch_uniprot_fasta
    report: list[tuple[str, list[int]]] = []
    for raw in protein_ids:
        protein_id = raw.strip()
        if not protein_id:
            continue
        try:
            text = fetch(protein_id)
        except OSError as exc:
            warnings.warn(f"could not fetch {protein_id}: {exc}", stacklevel=2)
            report.append((protein_id, []))
            continue
        report.append((protein_id, motif_positions(sequence_from_fasta(text))))
    return report