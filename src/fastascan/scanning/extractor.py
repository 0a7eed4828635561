"""
Header counting and residue extraction for a single FASTA file.

All records of a file are combined: the residue content is one string made
of every non-header line, so lengths and molecule type are per file.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from ..models import GAP_CHAR, HEADER_PREFIX, NoHeaderFoundError, SequenceRecord


# Gaps and ASCII whitespace only; other Unicode spaces stay residues
_STRIPPED_CHARS = re.compile(rf"[\s{re.escape(GAP_CHAR)}]", re.ASCII)


def clean_residue_line(line: str) -> str:
    """Remove gap characters and ASCII whitespace from a sequence line."""
    return _STRIPPED_CHARS.sub("", line)


def parse_fasta_lines(lines: Iterable[str], source: str = "<lines>") -> SequenceRecord:
    """
    Count headers and collect residues from FASTA lines.

    Args:
        lines: Lines of a FASTA file, with or without line endings
        source: Name used in the error message

    Returns:
        SequenceRecord with header count, residues and first header

    Raises:
        NoHeaderFoundError: If no line starts with '>'
    """
    header_count = 0
    first_header = None
    residue_parts = []

    for line in lines:
        if line.startswith(HEADER_PREFIX):
            header_count += 1
            if first_header is None:
                first_header = line.rstrip("\r\n")
        else:
            residue_parts.append(clean_residue_line(line))

    if first_header is None:
        raise NoHeaderFoundError(f"No FASTA header line found in {source}")

    return SequenceRecord(
        header_count=header_count,
        residues="".join(residue_parts),
        first_header=first_header,
    )


def extract_sequences(path: Path) -> SequenceRecord:
    """
    Read a FASTA file and extract its combined sequence content.

    Undecodable bytes are replaced so that binary files end up without a
    header instead of failing to decode.

    Args:
        path: File to read

    Returns:
        SequenceRecord for the whole file

    Raises:
        NoHeaderFoundError: If the file has no header line
        OSError: If the file cannot be opened or read
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_fasta_lines(handle, source=str(path))
