"""API response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.rows import ReadingListEntry, User
from core.types import BookState


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(CamelModel):
    """Public view of a user; never carries the password hash."""

    id: int
    name: str | None = None
    email: str

    @classmethod
    def from_row(cls, user: User) -> "UserResponse":
        """Create UserResponse from User (SQLModel)."""
        if user.user_id is None:
            raise ValueError("User has not been saved")
        return cls(id=user.user_id, name=user.name, email=user.email)


class SignInResponse(CamelModel):
    """Response model for a successful sign-in."""

    user: UserResponse
    access_token: str
    refresh_token: str


class SignUpResponse(CamelModel):
    """Response model for a successful sign-up."""

    user: UserResponse


class RefreshResponse(CamelModel):
    """Response model for a refreshed session."""

    access_token: str
    refresh_token: str


class ReadingListEntryResponse(CamelModel):
    """Response model for a reading-list entry."""

    id: int
    user_id: int
    book_id: str
    book_state: BookState
    current_page: int | None = None
    total_pages: int
    book: dict[str, Any] | None = None
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, entry: ReadingListEntry) -> "ReadingListEntryResponse":
        """Create ReadingListEntryResponse from ReadingListEntry (SQLModel)."""
        if entry.entry_id is None:
            raise ValueError("Reading-list entry has not been saved")
        return cls(
            id=entry.entry_id,
            user_id=entry.user_id,
            book_id=entry.book_id,
            book_state=entry.book_state,
            current_page=entry.current_page,
            total_pages=entry.total_pages,
            book=entry.book,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )


class MyBooksResponse(CamelModel):
    """A user's reading list grouped by state."""

    is_reading: list[ReadingListEntryResponse] = Field(default_factory=list)
    read: list[ReadingListEntryResponse] = Field(default_factory=list)
    wants_to_read: list[ReadingListEntryResponse] = Field(default_factory=list)


class BookSearchResponse(CamelModel):
    """Catalog search results passed through from the provider."""

    total_items: int = 0
    items: list[dict[str, Any]] = Field(default_factory=list)
