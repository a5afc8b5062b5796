"""Global pytest configuration and fixtures."""

import json
import re
from collections.abc import Generator
from logging import Logger
from pathlib import Path
from typing import Any

import pytest
from pytest_httpserver import HTTPServer
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlmodel import Session
from werkzeug.wrappers import Request, Response

from catalog.google_books import GoogleBooksClient
from core import setup_test_logging
from core.config import Settings
from core.database.engine import create_database_tables
from core.database.repository import ReadingListRepository, UserRepository
from core.models.domain.context import RequestContext
from core.models.rows import User
from core.services import AuthService, BookService, ReadingListService
from core.types import Environment

from tests.utils.test_helpers import TestDataFactory

ASSETS_DIR = Path(__file__).parent / "assets"
GOOGLE_BOOKS_PREFIX = "/books/v1"


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from core import get_logger

    return get_logger("test")


@pytest.fixture(scope="session")
def google_books_responses() -> dict[str, Any]:
    """Canned Google Books API responses."""
    with open(ASSETS_DIR / "google_books_responses.json", "r") as f:
        responses: dict[str, Any] = json.load(f)
    return responses


@pytest.fixture
def mock_google_books_server(
    httpserver: HTTPServer, google_books_responses: dict[str, Any]
) -> HTTPServer:
    """Set up a mock Google Books server.

    Volumes from the assets file are served by ID, ``BROKEN`` answers 500 and
    every other ID answers 404. Searching for ``fail`` answers 500 and
    searching for ``nothing`` returns no items.
    """

    def json_response(payload: Any, status: int = 200) -> Response:
        return Response(
            json.dumps(payload),
            status=status,
            headers={"Content-Type": "application/json"},
        )

    def volume_handler(request: Request) -> Response:
        volume_id = request.path.rsplit("/", 1)[-1]
        if volume_id == "BROKEN":
            return Response("Backend Error", status=500)

        volumes = google_books_responses["volumes"]
        if volume_id in volumes:
            return json_response(volumes[volume_id])
        return json_response(google_books_responses["not_found"], status=404)

    def search_handler(request: Request) -> Response:
        query = request.args.get("q", "")
        if query == "fail":
            return Response("Backend Error", status=500)
        if query == "nothing":
            return json_response(google_books_responses["empty_search"])

        max_results = int(request.args.get("maxResults", "10"))
        payload = dict(google_books_responses["search"])
        payload["items"] = payload["items"][:max_results]
        return json_response(payload)

    httpserver.expect_request(
        f"{GOOGLE_BOOKS_PREFIX}/volumes", method="GET"
    ).respond_with_handler(search_handler)
    httpserver.expect_request(
        re.compile(rf"^{GOOGLE_BOOKS_PREFIX}/volumes/[^/]+$"), method="GET"
    ).respond_with_handler(volume_handler)

    return httpserver


@pytest.fixture
def catalog_base_url(mock_google_books_server: HTTPServer) -> str:
    """Base URL of the mock Google Books API."""
    return mock_google_books_server.url_for(GOOGLE_BOOKS_PREFIX)


@pytest.fixture
def catalog_client(catalog_base_url: str) -> GoogleBooksClient:
    """Provide a GoogleBooksClient configured with the mock server."""
    return GoogleBooksClient(base_url=catalog_base_url, timeout=5.0)


@pytest.fixture
def mock_db_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """Create a real database engine for testing using a file-based database."""
    db_path = tmp_path / "test.db"
    database_url = f"sqlite:///{db_path}"

    engine = create_engine(
        database_url,
        echo=False,
        connect_args={
            "check_same_thread": False,
            "timeout": 60.0,
        },
    )
    create_database_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def mock_db_session(mock_db_engine: Engine) -> Generator[Session, None, None]:
    with Session(mock_db_engine) as session:
        yield session


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the testing environment."""
    return Settings(
        environment=Environment.TESTING,
        jwt_secret="test-secret",
        access_token_expires_seconds=3600,
        refresh_token_expires_seconds=3 * 3600,
    )


@pytest.fixture
def user_repo(mock_db_session: Session) -> UserRepository:
    """Create user repository instance."""
    return UserRepository(mock_db_session)


@pytest.fixture
def reading_list_repo(mock_db_session: Session) -> ReadingListRepository:
    """Create reading-list repository instance."""
    return ReadingListRepository(mock_db_session)


@pytest.fixture
def saved_user(user_repo: UserRepository) -> User:
    """Create and save a test user."""
    return user_repo.create(TestDataFactory.create_test_user())


@pytest.fixture
def request_context(
    saved_user: User,
    mock_db_session: Session,
    catalog_client: GoogleBooksClient,
) -> RequestContext:
    """Request context for the saved user."""
    assert saved_user.user_id is not None
    return RequestContext(
        user_id=saved_user.user_id,
        session=mock_db_session,
        catalog=catalog_client,
    )


@pytest.fixture
def auth_service(test_settings: Settings) -> AuthService:
    """Create AuthService instance."""
    return AuthService(test_settings)


@pytest.fixture
def book_service() -> BookService:
    """Create BookService instance."""
    return BookService()


@pytest.fixture
def reading_list_service() -> ReadingListService:
    """Create ReadingListService instance."""
    return ReadingListService()
