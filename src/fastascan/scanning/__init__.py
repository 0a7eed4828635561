"""
Scanning module for FASTA files.

This module locates FASTA-named files, extracts their combined sequence
content, classifies the molecule type and aggregates the results.
"""

from .classifier import NUCLEOTIDE_ALPHABET, classify_residues
from .extractor import extract_sequences, parse_fasta_lines
from .locator import locate_fasta_files
from .summarizer import scan_candidates, scan_directory, summarize_file

__all__ = [
    "NUCLEOTIDE_ALPHABET",
    "classify_residues",
    "extract_sequences",
    "locate_fasta_files",
    "parse_fasta_lines",
    "scan_candidates",
    "scan_directory",
    "summarize_file",
]
