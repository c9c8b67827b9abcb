"""Parse and normalize Google Books API responses."""
import logging
from collections.abc import Mapping
from typing import Dict, Any, List, Optional
from book_search.errors import ServerError
from book_search.isbn import find_isbn
from book_search.models import RawVolume, NormalizedBook

logger = logging.getLogger(__name__)

SUMMARY_MAX_LENGTH = 500


def truncate(text: str, max_length: int = -1, marker: str = "…") -> str:
    """
    Shorten text to a number of characters (codepoints, not bytes).

    Args:
        text: Text to shorten
        max_length: Maximum length; negative disables truncation
        marker: Appended when the text is cut

    Returns:
        The original text, or its head followed by the marker
    """
    length = len(text)
    if max_length < 0 or length <= max_length:
        return text
    # Negative stop counts from the end: keeps the first max_length characters
    return text[:max_length - length] + marker


def parse_book(item: Dict[str, Any]) -> Optional[NormalizedBook]:
    """
    Parse a single book item from Google Books API.

    Args:
        item: Single item from Google Books API response

    Returns:
        NormalizedBook, or None if the item has no volumeInfo or no ISBN

    Raises:
        ServerError: If the volumeInfo has no title
    """
    if item.get("volumeInfo") is None:
        logger.warning(f"Skipping item without volumeInfo: {item.get('id')}")
        return None

    try:
        volume = RawVolume.from_dict(item["volumeInfo"])
    except KeyError as e:
        logger.error(f"volumeInfo missing required field {e} (item {item.get('id')})")
        raise ServerError(f"Malformed volume: missing {e}") from e

    isbn = find_isbn(volume)
    if isbn is None:
        logger.warning(f"Skipping volume without ISBN: {volume.title}")
        return None

    author = None
    if volume.authors is not None:
        author = ",".join(volume.authors)

    summary = None
    if volume.description is not None:
        summary = truncate(volume.description, SUMMARY_MAX_LENGTH)

    # smallThumbnail overwrites thumbnail when both are present
    image_link = None
    if volume.image_links is not None:
        if volume.image_links.thumbnail is not None:
            image_link = volume.image_links.thumbnail
        if volume.image_links.small_thumbnail is not None:
            image_link = volume.image_links.small_thumbnail

    return NormalizedBook(
        title=volume.title,
        subtitle=volume.subtitle,
        author=author,
        publisher=volume.publisher,
        release=volume.published_date,
        summary=summary,
        isbn=isbn,
        image_link=image_link,
        language=volume.language if volume.language is not None else ""
    )


def parse_books_response(response_json: Dict[str, Any]) -> List[NormalizedBook]:
    """
    Parse full Google Books API response.

    Args:
        response_json: Complete API response JSON

    Returns:
        List of NormalizedBook objects in response order (empty if no items found)

    Raises:
        ServerError: If totalItems or items is missing, or items is not a list
    """
    if not isinstance(response_json, Mapping):
        logger.error(f"Unexpected response type: {type(response_json).__name__}")
        raise ServerError("Malformed response")

    if "totalItems" not in response_json or "items" not in response_json:
        logger.error(f"Response missing totalItems/items: keys={sorted(response_json)}")
        raise ServerError("Malformed response")

    if response_json["totalItems"] == 0:
        return []

    if not isinstance(response_json["items"], list):
        logger.error(f"Unexpected items type: {type(response_json['items']).__name__}")
        raise ServerError("Malformed response")

    books = []

    for item in response_json["items"]:
        book = parse_book(item)
        if book:
            books.append(book)

    logger.info(f"Parsed {len(books)} of {len(response_json['items'])} items")
    return books
