"""FastAPI dependencies for SQLModel integration."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.engine import Engine
from sqlmodel import Session

from catalog.google_books import GoogleBooksClient
from core.config import Settings
from core.services import AuthService, BookService, ReadingListService


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


# Database engine dependency
def get_engine(request: Request) -> Engine:
    """Get database engine from app state."""
    engine: Engine = request.app.state.engine
    return engine


# Database session dependency
def get_db(
    engine: Annotated[Engine, Depends(get_engine)],
) -> Generator[Session, None, None]:
    """Get a database session scoped to the request."""
    with Session(engine) as session:
        yield session


# Service dependencies
def get_catalog_client(request: Request) -> GoogleBooksClient:
    """Get Google Books client from app state."""
    client: GoogleBooksClient = request.app.state.catalog_client
    return client


def get_auth_service(request: Request) -> AuthService:
    """Get auth service from app state."""
    service: AuthService = request.app.state.auth_service
    return service


def get_book_service() -> BookService:
    """Get book service."""
    return BookService()


def get_reading_list_service() -> ReadingListService:
    """Get reading-list service."""
    return ReadingListService()
