"""SQLModel database models for Bookshelf."""

from typing import Any

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from core.types import BookState
from core.utils import get_current_timestamp


class User(SQLModel, table=True):
    """User database model using SQLModel."""

    user_id: int | None = Field(default=None, primary_key=True)
    name: str | None = Field(default=None, description="User display name")
    email: str = Field(unique=True, index=True, description="User email")
    password_hash: str = Field(description="Salted password hash")
    created_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime of sign-up",
    )

    # Relationship attributes
    reading_list: list["ReadingListEntry"] = Relationship(back_populates="user")


class ReadingListEntry(SQLModel, table=True):
    """A user's reading-list record for one catalog book."""

    entry_id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.user_id", index=True)
    book_id: str = Field(index=True, description="Catalog volume ID")
    book_state: BookState = Field(description="Reading state")
    current_page: int | None = Field(default=None, description="Last page reached")
    total_pages: int = Field(default=0, description="Page count from the catalog")
    book: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSON),
        description="Catalog payload cached when the book was added",
    )
    created_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime when the book was added",
    )
    updated_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime - automatically updated",
    )

    # One entry per (user, book); upserts conflict on this pair
    __table_args__ = (
        UniqueConstraint("user_id", "book_id", name="uq_reading_list_user_book"),
    )

    # Relationship attributes
    user: User = Relationship(back_populates="reading_list")
