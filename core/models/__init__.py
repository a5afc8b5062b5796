"""Unified models package for bookshelf system."""

# API models (request/response)
from core.models.api.requests import (
    AddToMyBooksRequest,
    SignInRequest,
    SignUpRequest,
    UpdateReadingRequest,
)
from core.models.api.responses import (
    BookSearchResponse,
    MyBooksResponse,
    ReadingListEntryResponse,
    RefreshResponse,
    SignInResponse,
    SignUpResponse,
    UserResponse,
)

# Database models (SQLModel rows)
from core.models.rows import ReadingListEntry, User

__all__ = [
    # API models
    "AddToMyBooksRequest",
    "SignInRequest",
    "SignUpRequest",
    "UpdateReadingRequest",
    "BookSearchResponse",
    "MyBooksResponse",
    "ReadingListEntryResponse",
    "RefreshResponse",
    "SignInResponse",
    "SignUpResponse",
    "UserResponse",
    # Database models (SQLModel rows)
    "ReadingListEntry",
    "User",
]
