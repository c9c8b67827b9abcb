"""ISBN detection and lookup helpers."""
import re
from typing import Dict, Optional
from book_search.models import RawVolume

# ISBN-10 [0-9]-[0-9]{2}-[0-9]{6}-[0-9X]
# ISBN-13 (978|979)-[0-9]-[0-9]{2}-[0-9]{6}-[0-9]
ISBN_PATTERN = re.compile(r"^(978|979)?-?[0-9]-?[0-9]{2}-?[0-9]{6}-?[0-9X]$")

# Lower rank wins
ISBN_PRIORITY = {
    "ISBN_13": 1,
    "ISBN_10": 2,
}


def is_isbn(code: str) -> bool:
    """
    Check whether a search term looks like an ISBN-10 or ISBN-13.

    Only the shape is checked; the check digit is not verified.

    Args:
        code: Search term

    Returns:
        True if the term has the shape of an ISBN
    """
    return ISBN_PATTERN.match(code) is not None


def build_query(search_term: str) -> str:
    """
    Build the ``q`` parameter for a search term.

    Args:
        search_term: Free text or ISBN

    Returns:
        ``isbn:<digits>`` for ISBNs, the free text otherwise
    """
    if is_isbn(search_term):
        return f"isbn:{search_term.replace('-', '')}"
    return search_term


def build_params(search_term: str, country: str = "JP") -> Dict[str, str]:
    """Query parameters for a volumes search."""
    return {
        "q": build_query(search_term),
        "country": country,
    }


def find_isbn(volume: RawVolume) -> Optional[str]:
    """
    Pick the ISBN of a volume, preferring ISBN-13 over ISBN-10.

    Args:
        volume: Parsed volumeInfo

    Returns:
        The ISBN, or None if the volume has no ISBN identifier
    """
    if volume.industry_identifiers is None:
        return None

    isbns: Dict[int, str] = {}
    for identifier in volume.industry_identifiers:
        rank = ISBN_PRIORITY.get(identifier.type)
        if rank is not None:
            isbns[rank] = identifier.identifier

    if not isbns:
        return None

    return isbns[min(isbns)]
