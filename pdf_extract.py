from __future__ import annotations

import logging
import math
from collections import defaultdict
from collections.abc import Iterable

from pdf_models import Table, TextItem

logger = logging.getLogger(__name__)

DEFAULT_ROW_TOLERANCE = 1.0
MIN_TABLE_ROWS = 2


def _row_key(y: float, tolerance: float) -> int:
    # half-up, so every bucket spans the same [k - 0.5, k + 0.5) window
    return math.floor(y / tolerance + 0.5)


def group_rows(
    items: Iterable[TextItem],
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> list[list[str]]:
    """Cluster one page's text items into rows of cell strings.

    Items whose ``y`` rounds to the same multiple of *tolerance* share a row.
    Rows come back top of page first (PDF y grows upward) and cells within a
    row left to right. Every item is its own cell; no column-gap merging is
    attempted.
    """
    if tolerance <= 0:
        raise ValueError(f"row tolerance must be positive, got {tolerance!r}")

    by_y: dict[int, list[TextItem]] = defaultdict(list)
    for item in items:
        text = item.text.strip()
        if not text:
            continue
        by_y[_row_key(item.y, tolerance)].append(TextItem(item.x, item.y, text))

    rows: list[list[str]] = []
    for y_key in sorted(by_y.keys(), reverse=True):
        row = sorted(by_y[y_key], key=lambda it: it.x)
        rows.append([it.text for it in row])
    return rows


def extract_tables(
    pages: Iterable[tuple[int, Iterable[TextItem]]],
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> list[Table]:
    """Return one Table per page that yields at least two rows.

    *pages* is a sequence of ``(page_number, items)`` pairs. Pages with fewer
    rows are treated as non-tabular and skipped; an empty result is not an
    error here, the caller decides what to report.
    """
    tables: list[Table] = []
    for page_number, items in pages:
        rows = group_rows(items, tolerance)
        if len(rows) < MIN_TABLE_ROWS:
            logger.debug("page %d: %d row(s), skipped", page_number, len(rows))
            continue
        logger.debug("page %d: table with %d rows", page_number, len(rows))
        tables.append(Table(rows=rows, page_number=page_number))
    return tables
