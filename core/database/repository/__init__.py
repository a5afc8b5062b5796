"""Repository layer for database operations."""

from .reading_list import ReadingListRepository
from .user import UserRepository

__all__ = [
    "ReadingListRepository",
    "UserRepository",
]
