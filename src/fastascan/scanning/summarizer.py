"""Per-file summaries and run-wide aggregation."""

import logging
from collections.abc import Iterable
from pathlib import Path

from tqdm import tqdm

from ..models import CandidateFile, FileReport, NoHeaderFoundError, ScanSummary, SequenceRecord
from .classifier import classify_residues
from .extractor import extract_sequences
from .locator import locate_fasta_files

logger = logging.getLogger(__name__)


def summarize_file(candidate: CandidateFile) -> tuple[FileReport, SequenceRecord]:
    """
    Build the summary row for one candidate file.

    Args:
        candidate: File found by the locator

    Returns:
        Tuple of (report row, extracted sequence record)

    Raises:
        NoHeaderFoundError: If the file has no header line
    """
    record = extract_sequences(candidate.path)
    report = FileReport(
        file_name=candidate.file_name,
        header_count=record.header_count,
        residue_length=record.residue_length,
        is_symlink=candidate.is_symlink,
        molecule_type=classify_residues(record.residues),
    )
    return report, record


def scan_candidates(candidates: Iterable[CandidateFile], root: Path) -> ScanSummary:
    """
    Summarize candidate files one after another.

    Files without a header, and files that cannot be read, are collected as
    discarded and do not count towards the totals.

    Args:
        candidates: Candidate files in processing order
        root: Scan root, kept on the summary for reporting

    Returns:
        ScanSummary with rows, discarded paths, totals and example title
    """
    summary = ScanSummary(root=root)

    show_progress = logger.isEnabledFor(logging.INFO)
    for candidate in tqdm(
        list(candidates),
        desc="Scanning FASTA files",
        unit="file",
        disable=not show_progress,
    ):
        try:
            report, record = summarize_file(candidate)
        except NoHeaderFoundError as e:
            logger.info(f"Discarding {candidate.path}: {e}")
            summary.add_discarded(candidate.path)
            continue
        except OSError as e:
            logger.info(f"Discarding unreadable file {candidate.path}: {e}")
            summary.add_discarded(candidate.path)
            continue

        logger.debug(
            f"{candidate.path}: {report.header_count} sequences, "
            f"{report.residue_length} residues, {report.molecule_type.value}"
        )
        summary.add_report(report, record.first_header)

    logger.info(
        f"Summarized {len(summary.reports):,} files "
        f"({summary.totals.sequence_count:,} sequences, "
        f"{summary.totals.sequence_length:,} residues), "
        f"discarded {len(summary.discarded):,}"
    )
    return summary


def scan_directory(root: Path | str | None = None) -> ScanSummary:
    """
    Locate and summarize all FASTA files below ``root``.

    Args:
        root: Directory to scan. Defaults to the current working directory.

    Returns:
        ScanSummary for the directory

    Raises:
        NoFastaFilesFoundError: If no candidate file exists under ``root``
    """
    root = Path.cwd() if root is None else Path(root)
    candidates = locate_fasta_files(root)
    return scan_candidates(candidates, root)
