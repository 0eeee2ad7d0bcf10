from __future__ import annotations

import io
import logging
from collections.abc import Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from pdf_errors import EmitFailure
from pdf_models import Table

logger = logging.getLogger(__name__)

MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 50

# worksheet limits of the xlsx format
MAX_ROWS = 1_048_576
MAX_COLUMNS = 16_384

SINGLE_SHEET_NAME = "Data"


def normalize_rows(rows: Sequence[Sequence[str]]) -> list[list[str]]:
    """Pad every row with empty cells up to the longest row. Never truncates."""
    max_cols = max((len(row) for row in rows), default=0)
    return [list(row) + [""] * (max_cols - len(row)) for row in rows]


def column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Display width per column: longest cell, clamped to the allowed range."""
    widths: list[int] = []
    for col in range(max((len(row) for row in rows), default=0)):
        longest = max(len(row[col]) if col < len(row) else 0 for row in rows)
        widths.append(min(max(longest, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH))
    return widths


def sheet_names(tables: Sequence[Table]) -> list[str]:
    """Name one sheet per table, unique within the workbook."""
    if len(tables) == 1:
        return [SINGLE_SHEET_NAME]

    names: list[str] = []
    seen: set[str] = set()
    for table in tables:
        base = f"Page {table.page_number}"
        name = base
        n = 2
        while name in seen:
            name = f"{base} ({n})"
            n += 1
        seen.add(name)
        names.append(name)
    return names


def _check_limits(table: Table) -> None:
    if len(table.rows) > MAX_ROWS:
        raise EmitFailure(
            f"Page {table.page_number} has {len(table.rows):,} rows; "
            f"a sheet holds at most {MAX_ROWS:,}."
        )
    if table.max_cols > MAX_COLUMNS:
        raise EmitFailure(
            f"Page {table.page_number} has {table.max_cols:,} columns; "
            f"a sheet holds at most {MAX_COLUMNS:,}."
        )


def emit_workbook(tables: Sequence[Table]) -> bytes:
    """Serialize *tables* into an xlsx workbook, one sheet per table.

    Raises ValueError when *tables* is empty (callers report that case before
    getting here) and EmitFailure when the workbook cannot be written.
    """
    if not tables:
        raise ValueError("emit_workbook() needs at least one table")

    wb = Workbook()
    wb.remove(wb.active)

    for table, name in zip(tables, sheet_names(tables)):
        _check_limits(table)
        rows = normalize_rows(table.rows)
        ws = wb.create_sheet(title=name)
        for r, row in enumerate(rows, 1):
            for c, text in enumerate(row, 1):
                cell = ws.cell(row=r, column=c, value=ILLEGAL_CHARACTERS_RE.sub("", text))
                # PDF text is data; "=..." must not become a formula
                cell.data_type = "s"
        for idx, width in enumerate(column_widths(rows), 1):
            ws.column_dimensions[get_column_letter(idx)].width = width
        logger.debug("sheet %r: %d rows x %d cols", name, len(rows), table.max_cols)

    buffer = io.BytesIO()
    try:
        wb.save(buffer)
    except Exception as exc:
        raise EmitFailure(f"Failed to write the Excel workbook: {exc}") from exc
    return buffer.getvalue()
