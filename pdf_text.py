from __future__ import annotations

import io
import logging
import warnings
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

import pdfplumber

from pdf_errors import DocumentUnreadable, PageUnavailable
from pdf_models import TextItem

logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", module="pdfminer")

logger = logging.getLogger(__name__)


@contextmanager
def open_pdf(source: str | Path | bytes) -> Iterator[pdfplumber.PDF]:
    """Open *source* (a path or raw PDF bytes) with pdfplumber."""
    stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        pdf = pdfplumber.open(stream)
    except Exception as exc:
        raise DocumentUnreadable(f"The PDF could not be opened: {exc}") from exc

    with pdf:
        try:
            page_count = len(pdf.pages)
        except Exception as exc:
            raise DocumentUnreadable(f"The PDF page tree could not be read: {exc}") from exc
        logger.debug("opened PDF with %d page(s)", page_count)
        yield pdf


def page_text_items(page: pdfplumber.page.Page) -> list[TextItem]:
    """Positioned words of one page, with y measured up from the page bottom."""
    try:
        words = page.extract_words()
    except Exception as exc:
        raise PageUnavailable(
            f"Page {page.page_number} could not be read: {exc}"
        ) from exc

    return [
        TextItem(x=float(w["x0"]), y=float(page.height - w["bottom"]), text=w["text"])
        for w in words
    ]


def read_pages(
    pdf: pdfplumber.PDF,
    page_numbers: Iterable[int],
) -> Iterator[tuple[int, list[TextItem]]]:
    """Yield ``(page_number, items)`` for each requested 1-based page.

    Usable on its own, so page numbers are checked here even though the
    conversion pipeline has already resolved them with pdf_pages.
    """
    page_count = len(pdf.pages)
    for page_number in page_numbers:
        if not 1 <= page_number <= page_count:
            raise PageUnavailable(
                f"Page {page_number} requested but the PDF has {page_count} page(s)."
            )
        items = page_text_items(pdf.pages[page_number - 1])
        logger.debug("page %d: %d text items", page_number, len(items))
        yield page_number, items
