"""API routers package."""

from .books import router as books_router
from .common import router as common_router
from .my_books import router as my_books_router
from .user import router as user_router

__all__ = [
    "books_router",
    "common_router",
    "my_books_router",
    "user_router",
]
