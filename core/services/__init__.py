"""Core services package."""

from .auth_service import AuthService
from .book_service import BookService
from .reading_list_service import ReadingListService

__all__ = [
    "AuthService",
    "BookService",
    "ReadingListService",
]
