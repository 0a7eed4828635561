import argparse
import logging
import sys
from pathlib import Path

from .models import NoFastaFilesFoundError
from .report import render_report
from .scanning import scan_directory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastascan",
        description=(
            "Summarize fasta files (*.fa, *.fasta) found in a directory and its subfolders."
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to scan (default: current directory)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Only problems reach stderr; the report is the sole output of a normal run
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        summary = scan_directory(args.directory)
    except NoFastaFilesFoundError as e:
        logger.debug(f"Scan aborted: {e}")
        print("### ERROR ###", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    sys.stdout.write(render_report(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
