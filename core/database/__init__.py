"""Core database functionality."""

from .engine import (
    create_database_engine,
    create_database_tables,
    drop_database_tables,
)
from .repository import ReadingListRepository, UserRepository

__all__ = [
    "ReadingListRepository",
    "UserRepository",
    "create_database_engine",
    "create_database_tables",
    "drop_database_tables",
]
