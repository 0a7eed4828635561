"""Discovery of FASTA-named files below a scan root."""

import logging
import os
from pathlib import Path

from ..models import FASTA_SUFFIXES, CandidateFile, NoFastaFilesFoundError

logger = logging.getLogger(__name__)


def is_fasta_name(name: str) -> bool:
    """Return True if ``name`` ends in one of the FASTA suffixes (case-sensitive)."""
    return name.endswith(FASTA_SUFFIXES)


def iter_fasta_paths(root: Path):
    """
    Yield FASTA-named files and symlinks below ``root``, recursively.

    Symlinked directories are reported when their own name matches but are
    never descended into. Entries are visited in name order within each
    directory so the walk order is stable between runs.
    """
    if not root.is_dir():
        if (root.exists() or root.is_symlink()) and is_fasta_name(root.name):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        dirnames.sort()
        current = Path(dirpath)
        linked_dirs = [d for d in dirnames if (current / d).is_symlink()]
        for name in sorted(filenames + linked_dirs):
            if is_fasta_name(name):
                yield current / name


def locate_fasta_files(root: Path | str | None = None) -> list[CandidateFile]:
    """
    Find all candidate FASTA files under a directory.

    Args:
        root: Directory to scan. Defaults to the current working directory.

    Returns:
        Candidate files in traversal order, with symlink status resolved.

    Raises:
        NoFastaFilesFoundError: If ``root`` does not exist or holds no match.
    """
    root = Path.cwd() if root is None else Path(root)
    logger.info(f"Searching FASTA files in {root}")

    candidates = [
        CandidateFile(path=path, is_symlink=path.is_symlink()) for path in iter_fasta_paths(root)
    ]

    if not candidates:
        raise NoFastaFilesFoundError(
            f"No fasta files could be found in {root}. Please make sure that, if an "
            "argument is being provided, it corresponds to an actual directory "
            "(example: $ fastascan this_folder/)"
        )

    logger.info(f"Found {len(candidates):,} candidate FASTA files")
    return candidates
