"""API request models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from core.types import BookState
from core.utils import normalize_email


def _validate_email(value: str) -> str:
    value = normalize_email(value)
    if "@" not in value or "." not in value:
        raise ValueError("Invalid email format")
    return value


class SignInRequest(BaseModel):
    """Request model for signing in.

    The email is only normalized; an address that cannot belong to any user
    fails as bad credentials rather than as a malformed request.
    """

    email: str = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="Plaintext password")

    @field_validator("email")
    @classmethod
    def normalize_sign_in_email(cls, v: str) -> str:
        """Normalize email for lookup."""
        return normalize_email(v)


class SignUpRequest(BaseModel):
    """Request model for signing up."""

    name: str | None = Field(default=None, max_length=200, description="Display name")
    email: str = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="Plaintext password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate and normalize email."""
        return _validate_email(v)


class AddToMyBooksRequest(BaseModel):
    """Request model for adding a book to the reading list or changing its state."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    book_id: str = Field(..., min_length=1, description="Catalog volume ID")
    book_state: BookState = Field(..., description="Requested reading state")

    @field_validator("book_id")
    @classmethod
    def validate_book_id(cls, v: str) -> str:
        """Strip the volume ID and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError("bookId must not be blank")
        return v


class UpdateReadingRequest(BaseModel):
    """Request model for reporting reading progress."""

    page: int = Field(..., ge=0, description="Page the user has reached")
