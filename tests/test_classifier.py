"""Tests for molecule type classification."""

import pytest

from fastascan.models import MoleculeType
from fastascan.scanning import NUCLEOTIDE_ALPHABET, classify_residues


def test_alphabet_is_exactly_acgtun_in_both_cases() -> None:
    assert NUCLEOTIDE_ALPHABET == frozenset("ACGTUNacgtun")


@pytest.mark.parametrize(
    "residues",
    ["ACGTACGU", "acgtn", "NNNN", "AcGuTn", "U"],
)
def test_nucleotide(residues: str) -> None:
    assert classify_residues(residues) is MoleculeType.NUCLEOTIDE


@pytest.mark.parametrize(
    "residues",
    ["MKVLA", "ACGTR", "ACGTX", "ACGT*", "acgt1"],
)
def test_amino_acid(residues: str) -> None:
    assert classify_residues(residues) is MoleculeType.AMINO_ACID


def test_empty_is_nucleotide() -> None:
    assert classify_residues("") is MoleculeType.NUCLEOTIDE


def test_single_foreign_character_decides_whole_content() -> None:
    residues = "ACGT" * 1000 + "M"

    assert classify_residues(residues) is MoleculeType.AMINO_ACID


def test_labels() -> None:
    assert MoleculeType.NUCLEOTIDE.value == "Nucleotide"
    assert MoleculeType.AMINO_ACID.value == "Amino Acid"
