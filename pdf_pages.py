from __future__ import annotations

import re

from pdf_errors import InvalidPageRange, PageUnavailable

_ALL_PAGES = frozenset({"", "all"})
_PART_RE = re.compile(r"^(\d+)(?:\s*-\s*(\d+))?$")


def parse_page_range(text: str | None) -> tuple[int, ...] | None:
    """Parse a selector like ``"1-3, 5, 7-9"``.

    Returns None for "all pages" (None, blank or ``"all"``), otherwise the
    selected page numbers sorted and de-duplicated.
    """
    if text is None or text.strip().lower() in _ALL_PAGES:
        return None

    pages: set[int] = set()
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        m = _PART_RE.match(part)
        if m is None:
            raise InvalidPageRange(f"Invalid page range {part!r} in {text!r}.")
        start = int(m.group(1))
        end = int(m.group(2)) if m.group(2) else start
        if start < 1:
            raise InvalidPageRange(f"Page numbers start at 1, got {part!r}.")
        if end < start:
            raise InvalidPageRange(f"Page range {part!r} runs backwards.")
        pages.update(range(start, end + 1))

    if not pages:
        raise InvalidPageRange(f"Page range {text!r} selects no pages.")
    return tuple(sorted(pages))


def resolve_pages(selection: tuple[int, ...] | None, page_count: int) -> list[int]:
    """Turn a parsed selection into concrete page numbers for a document."""
    if selection is None:
        return list(range(1, page_count + 1))

    missing = [p for p in selection if p > page_count]
    if missing:
        raise PageUnavailable(
            f"Page {missing[0]} requested but the PDF has {page_count} page(s)."
        )
    return list(selection)
