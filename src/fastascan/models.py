"""Data classes, type definitions, and constants for FASTA scanning."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# File naming and line conventions
FASTA_SUFFIXES: tuple[str, ...] = (".fa", ".fasta")
HEADER_PREFIX: str = ">"
GAP_CHAR: str = "-"


class NoFastaFilesFoundError(FileNotFoundError):
    """Raised when a scan root holds no file named like a FASTA file."""


class NoHeaderFoundError(ValueError):
    """Raised when a FASTA-named file contains no '>' header line."""


class MoleculeType(str, Enum):
    """Molecule type inferred from the combined residues of a file."""

    NUCLEOTIDE = "Nucleotide"
    AMINO_ACID = "Amino Acid"


@dataclass(frozen=True)
class CandidateFile:
    """A path named like a FASTA file, as found during the scan.

    Attributes:
        path: Path as reached from the scan root.
        is_symlink: Whether the path itself is a symbolic link.
    """

    path: Path
    is_symlink: bool

    @property
    def file_name(self) -> str:
        """File name with the directory stripped."""
        return self.path.name


@dataclass(frozen=True)
class SequenceRecord:
    """Sequence content of one file, all records combined.

    Attributes:
        header_count: Number of lines starting with '>'.
        residues: Non-header lines joined, with gaps and whitespace removed.
        first_header: Text of the first header line.
    """

    header_count: int
    residues: str
    first_header: str

    @property
    def residue_length(self) -> int:
        return len(self.residues)


@dataclass(frozen=True)
class FileReport:
    """One row of the summary table."""

    file_name: str
    header_count: int
    residue_length: int
    is_symlink: bool
    molecule_type: MoleculeType

    @property
    def symlink_label(self) -> str:
        return "Yes" if self.is_symlink else "No"


@dataclass(frozen=True)
class ExampleTitle:
    """Header line shown as an example, taken from the first parsed file."""

    file_name: str
    header: str


@dataclass
class AggregateTotals:
    """Running totals across all successfully parsed files."""

    sequence_count: int = 0
    sequence_length: int = 0

    def add(self, report: FileReport) -> None:
        self.sequence_count += report.header_count
        self.sequence_length += report.residue_length


@dataclass
class ScanSummary:
    """Everything collected during one scan, in processing order.

    Attributes:
        root: Directory that was scanned.
        reports: Per-file rows for files with at least one header.
        discarded: Paths of files from which no header could be read.
        totals: Sums of header counts and residue lengths over ``reports``.
        example_title: Header of the first parsed file, set once.
    """

    root: Path
    reports: list[FileReport] = field(default_factory=list)
    discarded: list[Path] = field(default_factory=list)
    totals: AggregateTotals = field(default_factory=AggregateTotals)
    example_title: ExampleTitle | None = None

    def add_report(self, report: FileReport, header: str) -> None:
        """Record a parsed file and capture the example title on first use."""
        self.reports.append(report)
        self.totals.add(report)
        if self.example_title is None:
            self.example_title = ExampleTitle(file_name=report.file_name, header=header)

    def add_discarded(self, path: Path) -> None:
        self.discarded.append(path)
