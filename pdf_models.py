from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextItem:
    """A positioned run of text from one PDF page (origin bottom-left)."""

    x: float
    y: float
    text: str


@dataclass
class Table:
    """All rows judged to be tabular on one page, top to bottom."""

    rows: list[list[str]]
    page_number: int

    @property
    def max_cols(self) -> int:
        return max((len(row) for row in self.rows), default=0)


@dataclass
class ConversionResult:
    """Outcome of one PDF to Excel conversion."""

    success: bool
    content: bytes | None = None
    filename: str | None = None
    error: str | None = None
    page_count: int = 0
    table_count: int = 0
    sheet_names: list[str] = field(default_factory=list)
