"""Tests for the Excel export."""

from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook  # type: ignore[import-untyped]

from doctoc.toc import parse_toc
from doctoc.xlsx import HEADERS, SHEET_NAME, write_workbook


def test_write_workbook_rows(sample_json: str, tmp_path: Path) -> None:
    """Each node becomes one row in display order."""

    out_file = tmp_path / "toc.xlsx"
    write_workbook(parse_toc(sample_json), out_file)

    workbook = load_workbook(out_file)
    assert workbook.sheetnames == [SHEET_NAME]
    sheet = workbook[SHEET_NAME]
    rows = list(sheet.iter_rows(values_only=True))

    assert list(rows[0]) == HEADERS
    assert len(rows) == 8
    assert rows[1] == ("intro", "intro", "Introduction", None, 1, 1, True)
    assert rows[3] == (
        "start/install",
        "install",
        "Installation",
        "start",
        2,
        1,
        True,
    )
    assert rows[4][5] == 2
    assert rows[5][:2] == ("runtime", "runtime")
    assert rows[5][5] == 3
    assert SHEET_NAME in sheet.tables


def test_write_workbook_empty(tmp_path: Path) -> None:
    """An empty table of contents still produces a header row."""

    out_file = tmp_path / "empty.xlsx"
    write_workbook(parse_toc("{}"), out_file)

    sheet = load_workbook(out_file)[SHEET_NAME]
    assert [cell.value for cell in sheet[1]] == HEADERS
    assert not sheet.tables
