"""Data models for books."""
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any


@dataclass
class IndustryIdentifier:
    """One entry of a volume's industryIdentifiers list."""
    type: str
    identifier: str


@dataclass
class ImageLinks:
    """Cover image URLs of a volume."""
    thumbnail: Optional[str] = None
    small_thumbnail: Optional[str] = None


@dataclass
class RawVolume:
    """
    The volumeInfo object of a Google Books item.

    ``None`` means the key was absent from the payload or null; an empty list or
    string means it was present but empty.
    """
    title: str
    subtitle: Optional[str] = None
    authors: Optional[List[str]] = None
    publisher: Optional[str] = None
    published_date: Optional[str] = None
    description: Optional[str] = None
    industry_identifiers: Optional[List[IndustryIdentifier]] = None
    image_links: Optional[ImageLinks] = None
    language: Optional[str] = None

    @classmethod
    def from_dict(cls, volume_info: Dict[str, Any]) -> "RawVolume":
        """
        Build a RawVolume from a decoded volumeInfo object.

        Args:
            volume_info: The item's volumeInfo mapping

        Returns:
            RawVolume

        Raises:
            KeyError: If the required title is missing
        """
        identifiers = None
        if volume_info.get("industryIdentifiers") is not None:
            identifiers = [
                IndustryIdentifier(
                    type=entry.get("type", ""),
                    identifier=entry.get("identifier", "")
                )
                for entry in volume_info["industryIdentifiers"]
            ]

        image_links = None
        if volume_info.get("imageLinks") is not None:
            links = volume_info["imageLinks"]
            image_links = ImageLinks(
                thumbnail=links.get("thumbnail"),
                small_thumbnail=links.get("smallThumbnail")
            )

        authors = volume_info.get("authors")

        return cls(
            title=volume_info["title"],
            subtitle=volume_info.get("subtitle"),
            authors=list(authors) if authors is not None else None,
            publisher=volume_info.get("publisher"),
            published_date=volume_info.get("publishedDate"),
            description=volume_info.get("description"),
            industry_identifiers=identifiers,
            image_links=image_links,
            language=volume_info.get("language")
        )


@dataclass
class NormalizedBook:
    """Normalized book representation."""
    title: str
    subtitle: Optional[str]
    author: Optional[str]
    publisher: Optional[str]
    release: Optional[str]
    summary: Optional[str]
    isbn: str
    image_link: Optional[str]
    language: str

    def to_dict(self) -> Dict[str, Any]:
        """Record shape handed to the front-end."""
        return asdict(self)
