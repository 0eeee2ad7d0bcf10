"""Convert the tables in a PDF document into an Excel workbook.

Words are grouped into rows by their vertical position, every page with more
than one row becomes a sheet. There is no ruling-line or column detection:
each word lands in its own cell, left to right.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pdf_extract import DEFAULT_ROW_TOLERANCE
from pdf_pipeline import convert_pdf_to_excel


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract tables from a PDF into an Excel (.xlsx) workbook.",
    )
    parser.add_argument("pdf", help="Path to the PDF file")
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Where to write the workbook (default: the PDF name with .xlsx)",
    )
    parser.add_argument(
        "-p", "--pages",
        default="all", metavar="RANGE",
        help='Pages to convert, e.g. "1-3, 5, 7-9" (default: all)',
    )
    parser.add_argument(
        "--row-tolerance",
        type=_positive_float, default=DEFAULT_ROW_TOLERANCE, metavar="T",
        help="Vertical distance that still counts as the same row "
             f"(default: {DEFAULT_ROW_TOLERANCE:g})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-page extraction details",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = Path(args.pdf)
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    result = convert_pdf_to_excel(
        path,
        page_range=args.pages,
        row_tolerance=args.row_tolerance,
        source_name=path.name,
    )
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else path.with_name(result.filename)
    output.write_bytes(result.content)

    plural = "s" if result.table_count > 1 else ""
    print(f"{result.table_count} sheet{plural} created from {result.page_count} page(s)")
    print(f"  Sheets:  {', '.join(result.sheet_names)}")
    print(f"  Written: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
