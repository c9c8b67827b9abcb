"""Tests for ISBN helpers."""
import pytest
from book_search.isbn import is_isbn, build_query, build_params, find_isbn
from book_search.models import RawVolume


@pytest.mark.parametrize("code", [
    "9784873115658",
    "978-4-87-311565-8",
    "4873115655",
    "4-87-311565-5",
    "487311565X",
    "4-87-311565-X",
    "9794873115658",
])
def test_is_isbn_accepts(code):
    """ISBN-10/13 shapes with or without hyphens are detected."""
    assert is_isbn(code)


@pytest.mark.parametrize("code", [
    "readable code",
    "",
    "487311565x",
    "48731156",
    "9774873115658",
    "978-4-87311-565-8",
    "isbn:9784873115658",
])
def test_is_isbn_rejects(code):
    """Free text and malformed codes are not ISBNs."""
    assert not is_isbn(code)


def test_build_query_isbn_strips_hyphens():
    """ISBN terms become an isbn: query without hyphens."""
    assert build_query("978-4-87-311565-8") == "isbn:9784873115658"
    assert build_query("4-87-311565-X") == "isbn:487311565X"


def test_build_query_free_text():
    """Free text is passed through for the transport to encode."""
    assert build_query("readable code") == "readable code"


def test_build_params():
    """Params carry the query and country."""
    assert build_params("4873115655") == {"q": "isbn:4873115655", "country": "JP"}
    assert build_params("python", country="US") == {"q": "python", "country": "US"}


def _volume(identifiers):
    info = {"title": "Book"}
    if identifiers is not None:
        info["industryIdentifiers"] = identifiers
    return RawVolume.from_dict(info)


def test_find_isbn_prefers_isbn13():
    """ISBN-13 wins regardless of order."""
    isbn10 = {"type": "ISBN_10", "identifier": "4873115655"}
    isbn13 = {"type": "ISBN_13", "identifier": "9784873115658"}

    assert find_isbn(_volume([isbn10, isbn13])) == "9784873115658"
    assert find_isbn(_volume([isbn13, isbn10])) == "9784873115658"


def test_find_isbn_falls_back_to_isbn10():
    """ISBN-10 is used when there is no ISBN-13."""
    identifiers = [
        {"type": "OTHER", "identifier": "OCLC:123"},
        {"type": "ISBN_10", "identifier": "4873115655"},
    ]

    assert find_isbn(_volume(identifiers)) == "4873115655"


def test_find_isbn_last_of_same_type_wins():
    """A repeated type keeps its last value."""
    identifiers = [
        {"type": "ISBN_13", "identifier": "9780000000001"},
        {"type": "ISBN_13", "identifier": "9780000000002"},
    ]

    assert find_isbn(_volume(identifiers)) == "9780000000002"


def test_find_isbn_none():
    """No identifiers, or only unknown ones, gives None."""
    assert find_isbn(_volume(None)) is None
    assert find_isbn(_volume([])) is None
    assert find_isbn(_volume([{"type": "OTHER", "identifier": "x"}])) is None
