"""Nucleotide / amino acid classification of residue content."""

from Bio.Data.IUPACData import unambiguous_dna_letters, unambiguous_rna_letters

from ..models import MoleculeType

# A, C, G, T, U and N (any base), matched case-insensitively
_NUCLEOTIDE_LETTERS = unambiguous_dna_letters + unambiguous_rna_letters + "N"
NUCLEOTIDE_ALPHABET: frozenset[str] = frozenset(
    _NUCLEOTIDE_LETTERS.upper() + _NUCLEOTIDE_LETTERS.lower()
)


def classify_residues(residues: str) -> MoleculeType:
    """
    Classify the combined residues of a file.

    Any character outside the nucleotide alphabet makes the whole file an
    amino acid file. An empty string has no such character and therefore
    classifies as nucleotide.

    Args:
        residues: Gap- and whitespace-free residue content

    Returns:
        MoleculeType.AMINO_ACID or MoleculeType.NUCLEOTIDE
    """
    if any(char not in NUCLEOTIDE_ALPHABET for char in residues):
        return MoleculeType.AMINO_ACID
    return MoleculeType.NUCLEOTIDE
