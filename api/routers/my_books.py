"""Reading-list overview router."""

from fastapi import APIRouter, Depends

from api.auth import get_request_context
from api.dependencies import get_reading_list_service
from api.utils.error_handler import handle_api_operation
from core.models import MyBooksResponse
from core.models.domain.context import RequestContext
from core.services import ReadingListService

router = APIRouter(prefix="/my-books", tags=["my-books"])


@router.get("", response_model=MyBooksResponse)
def get_my_books(
    ctx: RequestContext = Depends(get_request_context),
    reading_list_service: ReadingListService = Depends(get_reading_list_service),
) -> MyBooksResponse:
    """Get the caller's reading list grouped by reading state."""

    def list_operation() -> MyBooksResponse:
        return reading_list_service.list_for_user(ctx)

    return handle_api_operation(list_operation, error_message="Failed to get my books")
