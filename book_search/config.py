"""Configuration management."""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str) -> Optional[float]:
    """Read an optional float from the environment."""
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Application configuration."""
    
    # Use the canned response instead of calling Google Books
    BOOK_SEARCH_MOCK = _env_flag("BOOK_SEARCH_MOCK")
    
    # API
    GOOGLE_BOOKS_API_URL = os.getenv(
        "GOOGLE_BOOKS_API_URL", "https://www.googleapis.com/books/v1/volumes"
    )
    BOOK_SEARCH_COUNTRY = os.getenv("BOOK_SEARCH_COUNTRY", "JP")
    
    # No timeout unless one is configured
    REQUEST_TIMEOUT = _env_float("REQUEST_TIMEOUT")
