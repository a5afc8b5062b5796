"""Error handling utilities for API endpoints."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import HTTPException, status

from core.exceptions import (
    AlreadyExistsError,
    BookshelfError,
    NotFoundError,
    UnauthorizedError,
    UpstreamUnavailableError,
)
from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ERROR_STATUS_CODES: dict[type[BookshelfError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    AlreadyExistsError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UpstreamUnavailableError: status.HTTP_502_BAD_GATEWAY,
}


def to_http_exception(exc: Exception, error_message: str) -> HTTPException:
    """Translate a service exception into an HTTPException."""
    if isinstance(exc, HTTPException):
        return exc

    if isinstance(exc, BookshelfError):
        for error_type, status_code in ERROR_STATUS_CODES.items():
            if isinstance(exc, error_type):
                headers = None
                if status_code == status.HTTP_401_UNAUTHORIZED:
                    headers = {"WWW-Authenticate": "Bearer"}
                return HTTPException(
                    status_code=status_code, detail=str(exc), headers=headers
                )

    logger.error(f"{error_message}: {exc}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{error_message}: {str(exc)}",
    )


def handle_api_operation(
    operation: Callable[[], T],
    error_message: str = "Operation failed",
) -> T:
    """Handle API operations with consistent error handling."""
    try:
        return operation()
    except Exception as e:
        raise to_http_exception(e, error_message) from e


async def handle_async_api_operation(
    operation: Callable[[], Awaitable[T]],
    error_message: str = "Operation failed",
) -> T:
    """Handle async API operations with consistent error handling."""
    try:
        return await operation()
    except Exception as e:
        raise to_http_exception(e, error_message) from e
