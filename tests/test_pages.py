"""
Page range tests
"""
import pytest

from pdf_errors import InvalidPageRange, PageUnavailable
from pdf_pages import parse_page_range, resolve_pages


@pytest.mark.parametrize("text", [None, "", "  ", "all", "ALL"])
def test_all_pages(text):
    assert parse_page_range(text) is None


def test_mixed_selector():
    assert parse_page_range("1-3, 5, 7-9") == (1, 2, 3, 5, 7, 8, 9)


def test_overlaps_and_order_collapsed():
    assert parse_page_range("4, 2-3,3 - 4,1") == (1, 2, 3, 4)


def test_trailing_comma_ignored():
    assert parse_page_range("2,") == (2,)


@pytest.mark.parametrize("text", ["abc", "1-", "-3", "1-2-3", "1.5", "0", "0-2", "5-3", ","])
def test_invalid_selectors(text):
    with pytest.raises(InvalidPageRange):
        parse_page_range(text)


def test_resolve_all():
    assert resolve_pages(None, 3) == [1, 2, 3]


def test_resolve_selection():
    assert resolve_pages((1, 3), 3) == [1, 3]


def test_resolve_beyond_document():
    with pytest.raises(PageUnavailable) as exc:
        resolve_pages((2, 9), 4)
    assert "Page 9" in exc.value.message
