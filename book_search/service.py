"""Book search: fetch a Google Books response and normalize it."""
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional
from book_search.async_client import AsyncGoogleBooksClient
from book_search.client import GoogleBooksClient
from book_search.config import Config
from book_search.errors import ServerError
from book_search.mock import async_mock_response, mock_response
from book_search.models import NormalizedBook
from book_search.parse import parse_books_response

logger = logging.getLogger(__name__)

FetchFunc = Callable[[str], Optional[Dict[str, Any]]]
AsyncFetchFunc = Callable[[str], Awaitable[Optional[Dict[str, Any]]]]


class BookSearchService:
    """Searches books through an injected fetch function."""

    def __init__(self, fetch: FetchFunc, client: Optional[GoogleBooksClient] = None):
        """
        Args:
            fetch: Returns the decoded API response for a term, or None on failure
            client: Client owned by this service, closed by close()
        """
        self.fetch = fetch
        self.client = client

    @classmethod
    def from_config(cls, config: Config, client: Optional[GoogleBooksClient] = None) -> "BookSearchService":
        """
        Use the canned response in mock mode, the live API otherwise.

        A client passed in stays owned by the caller; one created here is
        closed by close().
        """
        if config.BOOK_SEARCH_MOCK:
            logger.info("Book search running in mock mode")
            return cls(mock_response)

        if client is not None:
            return cls(client.fetch)

        client = GoogleBooksClient(
            base_url=config.GOOGLE_BOOKS_API_URL,
            country=config.BOOK_SEARCH_COUNTRY,
            timeout=config.REQUEST_TIMEOUT
        )
        return cls(client.fetch, client=client)

    def search(self, search_term: str) -> List[NormalizedBook]:
        """
        Search books by free text or ISBN.

        Args:
            search_term: Free text or ISBN

        Returns:
            Normalized books in API order

        Raises:
            ServerError: If the fetch failed or the response is malformed
        """
        response = self.fetch(search_term)
        if response is None:
            logger.error(f"No response for {search_term!r}")
            raise ServerError("Book search request failed")

        return parse_books_response(response)

    def close(self):
        """Close the owned client, if any."""
        if self.client is not None:
            self.client.close()
            self.client = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class AsyncBookSearchService:
    """Async counterpart of BookSearchService."""

    def __init__(self, fetch: AsyncFetchFunc, client: Optional[AsyncGoogleBooksClient] = None):
        self.fetch = fetch
        self.client = client

    @classmethod
    def from_config(cls, config: Config, client: Optional[AsyncGoogleBooksClient] = None) -> "AsyncBookSearchService":
        """Use the canned response in mock mode, the given (or a new, owned) async client otherwise."""
        if config.BOOK_SEARCH_MOCK:
            logger.info("Book search running in mock mode")
            return cls(async_mock_response)

        if client is not None:
            return cls(client.fetch)

        client = AsyncGoogleBooksClient(
            base_url=config.GOOGLE_BOOKS_API_URL,
            country=config.BOOK_SEARCH_COUNTRY,
            timeout=config.REQUEST_TIMEOUT
        )
        return cls(client.fetch, client=client)

    async def search(self, search_term: str) -> List[NormalizedBook]:
        """Search books; raises ServerError like BookSearchService.search."""
        response = await self.fetch(search_term)
        if response is None:
            logger.error(f"No response for {search_term!r}")
            raise ServerError("Book search request failed")

        return parse_books_response(response)

    async def close(self):
        """Close the owned client, if any."""
        if self.client is not None:
            await self.client.close()
            self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
