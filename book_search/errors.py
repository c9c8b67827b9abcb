"""Exceptions raised by the book search service."""


class BookSearchError(Exception):
    """Base class for book search failures."""


class ServerError(BookSearchError):
    """Opaque server-side failure (maps to HTTP 500)."""

    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
        self.message = message
