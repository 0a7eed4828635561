from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``content`` to ``tmp_path / relative`` and return the path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def table_row() -> Callable[[str, str], list[str]]:
    """Return the whitespace-split cells of the report line starting with a given cell."""

    def _row(text: str, first_cell: str) -> list[str]:
        for line in text.splitlines():
            cells = line.split()
            if cells and cells[0] == first_cell:
                return cells
        raise AssertionError(f"No row starting with {first_cell!r} in:\n{text}")

    return _row
