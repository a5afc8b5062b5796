"""Service for a user's reading list."""

from typing import Any

from core.database.repository import ReadingListRepository
from core.exceptions import NotFoundError
from core.log import get_logger
from core.models import MyBooksResponse, ReadingListEntry, ReadingListEntryResponse
from core.models.domain.context import RequestContext
from core.services.book_service import fetch_catalog_volume
from core.types import BookState

logger = get_logger(__name__)


def get_page_count(volume: dict[str, Any]) -> int:
    """Page count of a catalog volume, 0 when the catalog does not report one."""
    page_count = (volume.get("volumeInfo") or {}).get("pageCount")
    try:
        return max(int(page_count), 0)
    except (TypeError, ValueError):
        return 0


def apply_reading_progress(entry: ReadingListEntry, page: int) -> ReadingListEntry:
    """Move the entry's bookmark to ``page``.

    Reaching (or passing) the last page clamps to ``total_pages`` and marks
    the book READ; any other page leaves the state as it was.
    """
    if page >= entry.total_pages:
        entry.current_page = entry.total_pages
        entry.book_state = BookState.READ
    else:
        entry.current_page = page
    return entry


class ReadingListService:
    """Service for reading-list operations."""

    async def add_or_update_book(
        self,
        ctx: RequestContext,
        book_id: str,
        book_state: BookState,
    ) -> ReadingListEntryResponse:
        """Add a book to the caller's list, or change its state if present.

        Progress of an existing entry is never touched. A new entry caches
        the catalog payload and takes its page count from it.

        Raises:
            NotFoundError: If the book is new to the list and unknown to the
                catalog
            UpstreamUnavailableError: If the catalog request fails
        """
        repo = ReadingListRepository(ctx.session)

        entry = repo.get_entry(ctx.user_id, book_id)
        if entry is not None:
            entry.book_state = book_state
            entry = repo.update(entry)
            logger.info(f"User {ctx.user_id} moved {book_id} to {book_state.value}")
            return ReadingListEntryResponse.from_row(entry)

        volume = await fetch_catalog_volume(ctx.catalog, book_id)
        entry = repo.upsert_entry(
            user_id=ctx.user_id,
            book_id=book_id,
            book_state=book_state,
            total_pages=get_page_count(volume),
            book=volume,
        )
        logger.info(f"User {ctx.user_id} added {book_id} as {book_state.value}")
        return ReadingListEntryResponse.from_row(entry)

    def record_progress(
        self,
        ctx: RequestContext,
        book_id: str,
        page: int,
    ) -> ReadingListEntryResponse:
        """Record the page the caller has reached in a book.

        Raises:
            NotFoundError: If the book is not on the caller's list
        """
        repo = ReadingListRepository(ctx.session)

        entry = repo.get_entry(ctx.user_id, book_id)
        if entry is None:
            raise NotFoundError(f"Book {book_id} is not on the reading list")

        entry = repo.update(apply_reading_progress(entry, page))
        logger.info(
            f"User {ctx.user_id} reached page {entry.current_page}/"
            f"{entry.total_pages} of {book_id}"
        )
        return ReadingListEntryResponse.from_row(entry)

    def list_for_user(self, ctx: RequestContext) -> MyBooksResponse:
        """Get the caller's reading list grouped by state."""
        groups: dict[BookState, list[ReadingListEntryResponse]] = {
            state: [] for state in BookState
        }
        for entry in ReadingListRepository(ctx.session).get_user_entries(ctx.user_id):
            groups[entry.book_state].append(ReadingListEntryResponse.from_row(entry))

        return MyBooksResponse(
            is_reading=groups[BookState.IS_READING],
            read=groups[BookState.READ],
            wants_to_read=groups[BookState.WANTS_TO_READ],
        )
