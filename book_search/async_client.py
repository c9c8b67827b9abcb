"""Async HTTP client for Google Books API."""
import httpx
from typing import Optional, Dict, Any
import logging
from book_search.isbn import build_params

logger = logging.getLogger(__name__)


class AsyncGoogleBooksClient:
    """Async client for the Google Books volumes search."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        base_url: Optional[str] = None,
        country: str = "JP",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            base_url: Volumes endpoint (defaults to BASE_URL)
            country: Value of the country query parameter
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Custom httpx transport
        """
        self.base_url = base_url or self.BASE_URL
        self.country = country

        # Create async HTTP client
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def fetch(self, search_term: str) -> Optional[Dict[str, Any]]:
        """
        Search for books asynchronously.

        Args:
            search_term: Free text or ISBN

        Returns:
            Decoded API response, or None on transport or decode failure
        """
        params = build_params(search_term, self.country)

        try:
            logger.info(f"Async request: {self.base_url} q={params['q']}")
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPError as e:
            logger.warning(f"Async request failed for {search_term!r}: {e}")
            return None

        except ValueError as e:
            logger.warning(f"Response for {search_term!r} is not JSON: {e}")
            return None

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
