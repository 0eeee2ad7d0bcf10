"""PDF to Excel conversion boundary.

  1. open the PDF and pick pages     – pdf_text.open_pdf / pdf_pages
  2. cluster words into rows/tables  – pdf_extract.extract_tables
  3. write one sheet per table       – xlsx_emit.emit_workbook

Every ConversionError raised on the way is turned into a failed
ConversionResult carrying its message.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pdf_errors import ConversionError, InvalidOption, NoTabularContent
from pdf_extract import DEFAULT_ROW_TOLERANCE, extract_tables
from pdf_models import ConversionResult, Table
from pdf_pages import parse_page_range, resolve_pages
from pdf_text import open_pdf, read_pages
from xlsx_emit import emit_workbook, sheet_names

logger = logging.getLogger(__name__)

_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)


def suggest_filename(source_name: str) -> str:
    """``report.PDF`` -> ``report.xlsx``; names without .pdf get .xlsx appended."""
    name = Path(source_name).name or "document"
    if _PDF_SUFFIX_RE.search(name):
        return _PDF_SUFFIX_RE.sub(".xlsx", name)
    return f"{name}.xlsx"


def extract_document_tables(
    source: str | Path | bytes,
    page_range: str | None = None,
    row_tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> tuple[list[Table], int]:
    """Return the tables found in *source* and its total page count."""
    if not row_tolerance > 0:
        raise InvalidOption(f"Row tolerance must be greater than 0, got {row_tolerance!r}.")
    selection = parse_page_range(page_range)
    with open_pdf(source) as pdf:
        page_count = len(pdf.pages)
        page_numbers = resolve_pages(selection, page_count)
        tables = extract_tables(read_pages(pdf, page_numbers), row_tolerance)
    logger.info("Found %d table(s) on %d of %d page(s)", len(tables), len(page_numbers), page_count)
    return tables, page_count


def convert_pdf_to_excel(
    source: str | Path | bytes,
    page_range: str | None = None,
    row_tolerance: float = DEFAULT_ROW_TOLERANCE,
    source_name: str | None = None,
) -> ConversionResult:
    """Convert a PDF (path or bytes) into xlsx bytes.

    Never raises for document problems; check ``result.success`` and
    ``result.error`` instead.
    """
    if source_name is None:
        source_name = str(source) if isinstance(source, (str, Path)) else "document.pdf"

    page_count = 0
    try:
        tables, page_count = extract_document_tables(source, page_range, row_tolerance)
        if not tables:
            raise NoTabularContent()
        content = emit_workbook(tables)
    except ConversionError as exc:
        logger.warning("PDF to Excel conversion failed (%s): %s", type(exc).__name__, exc.message)
        return ConversionResult(success=False, error=exc.message, page_count=page_count)

    return ConversionResult(
        success=True,
        content=content,
        filename=suggest_filename(source_name),
        page_count=page_count,
        table_count=len(tables),
        sheet_names=sheet_names(tables),
    )
