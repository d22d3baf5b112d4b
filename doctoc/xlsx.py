"""Utilities for exporting a table of contents to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from doctoc.toc import TableOfContents
from doctoc.toc.walk import PATH_SEPARATOR, iter_nodes

Row = Dict[str, Any]

SHEET_NAME = "Sections"
HEADERS = ["path", "key", "name", "parent", "depth", "position", "is_leaf"]


def _flatten(toc: TableOfContents) -> List[Row]:
    """Flatten the tree into one row per node in display order.

    Args:
        toc: Table of contents to flatten.

    Returns:
        Row dictionaries keyed by ``HEADERS``.
    """

    rows: List[Row] = []

    # Position of the next child under each parent path.
    positions: Dict[tuple[str, ...], int] = {}

    for path, node in iter_nodes(toc):
        parent = path[:-1]
        position = positions.get(parent, 0) + 1
        positions[parent] = position
        rows.append(
            {
                "path": PATH_SEPARATOR.join(path),
                "key": node.key,
                "name": node.name,
                "parent": PATH_SEPARATOR.join(parent) or None,
                "depth": len(path),
                "position": position,
                "is_leaf": node.is_leaf,
            }
        )
    return rows


def write_workbook(toc: TableOfContents, path: Path) -> None:
    """Write the table of contents into an Excel workbook.

    Args:
        toc: Table of contents to export.
        path: Destination file path for the workbook.
    """

    rows = _flatten(toc)

    # Create a workbook and remove the default sheet created by openpyxl.
    workbook = Workbook()
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    ws = workbook.create_sheet(title=SHEET_NAME)
    ws.append(HEADERS)

    # Track columns containing long text for wrapping and custom width.
    long_text_columns: set[int] = set()
    for row in rows:
        values: List[Any] = []
        for idx, header in enumerate(HEADERS):
            cell_value = row[header]
            if isinstance(cell_value, str) and len(cell_value) > 50:
                long_text_columns.add(idx)
            values.append(cell_value)
        ws.append(values)

    # Apply wrap text alignment to the marked columns.
    for col_idx in long_text_columns:
        for col_cells in ws.iter_cols(
            min_col=col_idx + 1,
            max_col=col_idx + 1,
            min_row=1,
            max_row=ws.max_row,
        ):
            for cell in col_cells:
                cell.alignment = Alignment(wrapText=True)

    # Set column widths based on the contained data.
    for idx, header in enumerate(HEADERS):
        col_letter = get_column_letter(idx + 1)
        if idx in long_text_columns:
            ws.column_dimensions[col_letter].width = 100
        elif header in ("path", "name", "parent"):
            ws.column_dimensions[col_letter].width = 40
        else:
            ws.column_dimensions[col_letter].width = 12

    # A table needs at least one data row besides the header.
    if rows:
        end_column = get_column_letter(len(HEADERS))
        end_row = len(rows) + 1
        table = Table(displayName=SHEET_NAME, ref=f"A1:{end_column}{end_row}")

        # Apply a simple table style with row stripes for readability.
        style = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True)
        table.tableStyleInfo = style
        ws.add_table(table)

    workbook.save(path)
