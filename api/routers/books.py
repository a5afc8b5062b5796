"""Catalog and reading-list book router."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from api.auth import get_request_context
from api.dependencies import (
    get_book_service,
    get_reading_list_service,
    get_settings,
)
from api.utils.error_handler import (
    handle_api_operation,
    handle_async_api_operation,
)
from catalog.google_books.constants import MAX_RESULTS_LIMIT
from core.config import Settings
from core.models import (
    AddToMyBooksRequest,
    BookSearchResponse,
    ReadingListEntryResponse,
    UpdateReadingRequest,
)
from core.models.domain.context import RequestContext
from core.services import BookService, ReadingListService

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=BookSearchResponse)
async def search_books(
    q: str = Query(..., min_length=1, description="Free-text catalog query"),
    max_results: int | None = Query(
        default=None,
        alias="maxResults",
        ge=1,
        le=MAX_RESULTS_LIMIT,
        description="Number of results to return",
    ),
    ctx: RequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings),
    book_service: BookService = Depends(get_book_service),
) -> BookSearchResponse:
    """Search the book catalog.

    Raises:
        HTTPException: 502 if the catalog is unavailable
    """

    async def search_operation() -> BookSearchResponse:
        return await book_service.search_books(
            ctx, q, max_results or settings.default_max_results
        )

    return await handle_async_api_operation(
        search_operation, error_message="Failed to search books"
    )


@router.post(
    "/my-books",
    response_model=ReadingListEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_to_my_books(
    body: AddToMyBooksRequest,
    ctx: RequestContext = Depends(get_request_context),
    reading_list_service: ReadingListService = Depends(get_reading_list_service),
) -> ReadingListEntryResponse:
    """Add a book to the reading list, or change the state of a listed book.

    Raises:
        HTTPException: 404 if the book is unknown to the catalog
    """

    async def add_operation() -> ReadingListEntryResponse:
        return await reading_list_service.add_or_update_book(
            ctx, body.book_id, body.book_state
        )

    return await handle_async_api_operation(
        add_operation, error_message="Failed to add book"
    )


@router.get("/{book_id}", response_model=None)
async def get_book_details(
    book_id: str,
    ctx: RequestContext = Depends(get_request_context),
    book_service: BookService = Depends(get_book_service),
) -> dict[str, Any]:
    """Get catalog details of a book with the caller's reading state.

    Raises:
        HTTPException: 404 if the book is unknown to the catalog
    """

    async def details_operation() -> dict[str, Any]:
        return await book_service.get_book_details(ctx, book_id)

    return await handle_async_api_operation(
        details_operation, error_message="Failed to get book details"
    )


@router.put("/{book_id}/reading", response_model=ReadingListEntryResponse)
def update_book_reading(
    book_id: str,
    body: UpdateReadingRequest,
    ctx: RequestContext = Depends(get_request_context),
    reading_list_service: ReadingListService = Depends(get_reading_list_service),
) -> ReadingListEntryResponse:
    """Record reading progress for a listed book.

    Raises:
        HTTPException: 404 if the book is not on the reading list
    """

    def progress_operation() -> ReadingListEntryResponse:
        return reading_list_service.record_progress(ctx, book_id, body.page)

    return handle_api_operation(
        progress_operation, error_message="Failed to update reading position"
    )
