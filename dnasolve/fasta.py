"""Reading FASTA text into a mapping of identifier to sequence."""

from __future__ import annotations

import os


def parse_fasta(text: str) -> dict[str, str]:
    """Parse FASTA text into ``{identifier: sequence}``.

    Text before the first ``>`` is ignored, newlines inside a sequence are
    dropped, a header with no line break after it ends parsing, and a
    repeated identifier keeps the last sequence given for it.
    """
    records: dict[str, str] = {}
    marker = text.find(">")
    while marker != -1:
        start = marker + 1
        end_of_header = text.find("\n", start)
        if end_of_header == -1:
            break
        identifier = text[start:end_of_header]
        body_start = end_of_header + 1
        marker = text.find(">", body_start)
        body = text[body_start:] if marker == -1 else text[body_start:marker]
        records[identifier] = body.replace("\n", "")
    return records


def read_fasta(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read and parse a FASTA file."""
    with open(path, encoding="utf-8") as handle:
        return parse_fasta(handle.read())