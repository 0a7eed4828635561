"""
Text rendering of a scan summary.

Tables are assembled as pandas DataFrames and rendered in memory with
left-aligned columns; nothing is written to disk.
"""

import pandas as pd

from .models import ScanSummary

SUMMARY_COLUMNS = ["FILE NAME", "NUM SEQ", "SEQ LEN", "SYMLINK", "TYPE"]
DISCARDED_COLUMN = "DISCARDED FILES"
OVERALL_LABEL = "OVERALL RESULTS*"
SEPARATOR = "-"

LEGEND = [
    "  NUM SEQ: number of sequences contained in fasta file",
    "  SEQ LEN: total sequence length of all sequences in fasta file (in nt or aa, see 'TYPE' field)",
    "  SYMLINK: is fasta file a symbolic link? (Yes/No)",
    "  TYPE: informs about if fasta file contains amino acid or nucleotide sequences",
]
OVERALL_FOOTNOTE = "* Overall results obtained by summing up the values from all files."


def build_summary_table(summary: ScanSummary) -> pd.DataFrame:
    """
    Build the per-file table followed by a separator and the totals row.

    Args:
        summary: Result of a scan

    Returns:
        DataFrame with SUMMARY_COLUMNS, rows in processing order
    """
    rows = [
        [
            report.file_name,
            report.header_count,
            report.residue_length,
            report.symlink_label,
            report.molecule_type.value,
        ]
        for report in summary.reports
    ]
    rows.append([SEPARATOR] * len(SUMMARY_COLUMNS))
    rows.append(
        [OVERALL_LABEL, summary.totals.sequence_count, summary.totals.sequence_length, "", ""]
    )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def build_discarded_table(summary: ScanSummary) -> pd.DataFrame:
    """Build a one-column table of discarded paths, as found during the scan."""
    return pd.DataFrame({DISCARDED_COLUMN: [str(path) for path in summary.discarded]})


def _left_aligned(width: int):
    return lambda value: f"{value:<{width}}"


def format_table(df: pd.DataFrame) -> str:
    """Render a DataFrame as plain text with every column left-aligned."""
    text = df.astype(str)
    formatters = {
        col: _left_aligned(max([len(col), *text[col].str.len().tolist()])) for col in text.columns
    }
    lines = text.to_string(index=False, justify="left", formatters=formatters).splitlines()
    return "\n".join(line.rstrip() for line in lines)


def render_report(summary: ScanSummary) -> str:
    """
    Render the full report: summary table, example title, legend and,
    when present, the discarded files.

    Args:
        summary: Result of a scan

    Returns:
        Report text ending with a newline
    """
    lines = [
        "",
        "== FASTA SUMMARY ==",
        "Please find below a table with a brief summary of fasta files found "
        "in the directory and subfolders:",
        "",
        format_table(build_summary_table(summary)),
        "",
    ]

    title = summary.example_title
    if title is not None:
        lines.append(
            f"Also, please find a fasta title found in '{title.file_name}' as an example:"
        )
        lines.append(f"{title.file_name}: {title.header}")
    else:
        lines.append("No fasta title could be retrieved from the files found.")
    lines.append("")

    lines.append("== LEGEND ==")
    lines.extend(LEGEND)
    lines.extend(["", OVERALL_FOOTNOTE, ""])

    if summary.discarded:
        lines.extend(
            [
                "== DISCARDED FILES!! ==",
                "FYI - please be aware that the below fasta files exist, but no fasta "
                "information can be retrieved from them.",
                "For this reason, no information from them can be displayed in the "
                "previous sections...",
                "",
                format_table(build_discarded_table(summary)),
                "",
                "Possible reasons might be: files are empty, do not contain fasta "
                "information or it is unintelligible (are they hidden/binary files?).",
                "You might consider reviewing them.",
                "",
            ]
        )

    return "\n".join(lines) + "\n"
