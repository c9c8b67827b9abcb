"""HTTP client for Google Books API."""
import requests
from typing import Optional, Dict, Any
import logging
from book_search.isbn import build_params

logger = logging.getLogger(__name__)


class GoogleBooksClient:
    """Client for the Google Books volumes search. One attempt per call, no retries."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        base_url: Optional[str] = None,
        country: str = "JP",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Google Books API client.

        Args:
            base_url: Volumes endpoint (defaults to BASE_URL)
            country: Value of the country query parameter
            timeout: Request timeout in seconds (None waits indefinitely)
            session: Session to reuse; a new one is created if omitted
        """
        self.base_url = base_url or self.BASE_URL
        self.country = country
        self.timeout = timeout

        # Create session for connection pooling
        self.session = session or requests.Session()

    def fetch(self, search_term: str) -> Optional[Dict[str, Any]]:
        """
        Search for books by free text or ISBN.

        Args:
            search_term: Free text or ISBN (hyphens allowed)

        Returns:
            Decoded API response, or None on transport or decode failure
        """
        params = build_params(search_term, self.country)

        try:
            logger.info(f"Request: {self.base_url} q={params['q']}")

            response = self.session.get(
                self.base_url,
                params=params,
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.HTTPError as e:
            logger.warning(f"HTTP error for {search_term!r}: {e}")
            return None

        except requests.exceptions.RequestException as e:
            logger.warning(f"Request failed for {search_term!r}: {e}")
            return None

        except ValueError as e:
            logger.warning(f"Response for {search_term!r} is not JSON: {e}")
            return None

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
