#!/usr/bin/env python3
"""Book Explorer CLI - Google Books search."""
import argparse
import asyncio
import sys
import json
from typing import List
from tabulate import tabulate
from book_search.config import Config
from book_search.errors import ServerError
from book_search.models import NormalizedBook
from book_search.service import BookSearchService, AsyncBookSearchService
import logging

logger = logging.getLogger(__name__)


def search_books_sync(args, config: Config) -> List[NormalizedBook]:
    """Search for books using sync client."""
    with BookSearchService.from_config(config) as service:
        return service.search(args.query)


async def search_books_async(args, config: Config) -> List[NormalizedBook]:
    """Search for books using async client."""
    async with AsyncBookSearchService.from_config(config) as service:
        return await service.search(args.query)


def display_books(books: List[NormalizedBook], format_type: str):
    """Display books in specified format."""
    if format_type == "table":
        headers = ["Title", "Author", "Publisher", "Release", "ISBN", "Language"]
        rows = [
            [
                book.title[:50] + "..." if len(book.title) > 50 else book.title,
                book.author or "Unknown",
                book.publisher or "",
                book.release or "",
                book.isbn,
                book.language
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    elif format_type == "json":
        print(json.dumps([book.to_dict() for book in books], indent=2, ensure_ascii=False))

    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.author or 'Unknown'} ({book.isbn})")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Book Explorer - Google Books search CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Free-text search
  %(prog)s search "readable code"

  # ISBN search, JSON output
  %(prog)s search 978-4-87-311565-8 --format json

  # Offline, canned response
  %(prog)s search anything --mock
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search for books")
    search_parser.add_argument("query", help="Search query or ISBN")
    search_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")
    search_parser.add_argument("--mock", action="store_true", help="Use the canned response instead of the API")
    search_parser.add_argument("--async", dest="use_async", action="store_true", help="Use async client")

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    if args.mock:
        config.BOOK_SEARCH_MOCK = True

    try:
        if args.use_async:
            books = asyncio.run(search_books_async(args, config))
        else:
            books = search_books_sync(args, config)

        logger.info(f"Found {len(books)} books")
        display_books(books, args.format)

    except ServerError as e:
        logger.error(f"❌ Search failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
