"""
Test configuration and fixtures
"""
import io

import pytest
from openpyxl import load_workbook

from pdf_models import TextItem


def _escape(text):
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages):
    """Write a minimal PDF: one list of (x, y, text) per page, Helvetica 12pt."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for pid, items in zip(page_ids, pages):
        stream = "".join(
            f"BT /F1 12 Tf {x} {y} Td ({_escape(text)}) Tj ET\n" for x, y, text in items
        ).encode("latin-1")
        objects[pid] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
        ).encode()
        objects[pid + 1] = b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for num in sorted(objects):
        offsets[num] = len(out)
        out += b"%d 0 obj\n" % num + objects[num] + b"\nendobj\n"

    xref_at = len(out)
    size = max(objects) + 1
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        out += b"%010d 00000 n \n" % offsets[num]
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_at)
    return bytes(out)


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def name_age_items():
    """The two-row name/age page used throughout the tests."""
    return [
        TextItem(10, 700, "Name"),
        TextItem(80, 700, "Age"),
        TextItem(10, 680, "Alice"),
        TextItem(80, 680, "30"),
    ]


@pytest.fixture
def name_age_pdf():
    return build_pdf([[(10, 700, "Name"), (80, 700, "Age"), (10, 680, "Alice"), (80, 680, "30")]])


@pytest.fixture
def read_workbook():
    def _read(content):
        return load_workbook(io.BytesIO(content))
    return _read


@pytest.fixture
def sheet_values():
    """Rows of a worksheet as strings, empty cells as ''."""
    def _values(ws):
        return [["" if v is None else str(v) for v in row] for row in ws.iter_rows(values_only=True)]
    return _values
