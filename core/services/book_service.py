"""Service for catalog search and book details."""

from typing import Any

from catalog.google_books import (
    CatalogError,
    CatalogNotFoundError,
    GoogleBooksClient,
)
from core.database.repository import ReadingListRepository
from core.exceptions import NotFoundError, UpstreamUnavailableError
from core.log import get_logger
from core.models import BookSearchResponse
from core.models.domain.context import RequestContext

logger = get_logger(__name__)


async def fetch_catalog_volume(
    catalog: GoogleBooksClient, book_id: str
) -> dict[str, Any]:
    """Fetch a volume, translating catalog failures into domain errors.

    Raises:
        NotFoundError: If the catalog does not know the book
        UpstreamUnavailableError: If the catalog request fails
    """
    try:
        return await catalog.get_volume(book_id)
    except CatalogNotFoundError:
        raise NotFoundError(f"Book {book_id} not found")
    except CatalogError as e:
        raise UpstreamUnavailableError(f"Book catalog unavailable: {e}")


class BookService:
    """Service for catalog-backed book operations."""

    async def search_books(
        self, ctx: RequestContext, query: str, max_results: int
    ) -> BookSearchResponse:
        """Search the catalog and pass its results through."""
        try:
            data = await ctx.catalog.search(query, max_results)
        except CatalogError as e:
            raise UpstreamUnavailableError(f"Book catalog unavailable: {e}")

        return BookSearchResponse(
            total_items=data["totalItems"],
            items=data["items"],
        )

    async def get_book_details(
        self, ctx: RequestContext, book_id: str
    ) -> dict[str, Any]:
        """Get the catalog volume with the caller's reading state merged in.

        ``bookState`` is None when the book is not on the caller's list.
        """
        volume = await fetch_catalog_volume(ctx.catalog, book_id)
        entry = ReadingListRepository(ctx.session).get_entry(ctx.user_id, book_id)

        return {
            **volume,
            "bookState": entry.book_state.value if entry else None,
        }
