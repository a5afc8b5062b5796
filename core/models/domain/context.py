"""Per-request context passed explicitly to services."""

from dataclasses import dataclass

from sqlmodel import Session

from catalog.google_books import GoogleBooksClient


@dataclass(frozen=True)
class RequestContext:
    """Everything a service needs to act on behalf of one authenticated user."""

    user_id: int
    session: Session
    catalog: GoogleBooksClient
