"""Common fixtures for integration tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from api.app import create_app
from api.services.app_initializer import AppServiceInitializer
from core.config import load_settings
from core.log import get_logger

from tests.utils.test_helpers import sign_up_and_sign_in

logger = get_logger(__name__)


@pytest_asyncio.fixture
async def integration_client(
    monkeypatch: pytest.MonkeyPatch,
    mock_db_engine: Engine,
    catalog_base_url: str,
) -> AsyncGenerator[TestClient, None]:
    """Create a test client using AppServiceInitializer with mock dependencies."""

    # Set environment to testing for integration tests
    monkeypatch.setenv("BOOKSHELF_ENV", "testing")
    monkeypatch.setenv("BOOKSHELF_JWT_SECRET", "integration-secret")
    monkeypatch.delenv("GOOGLE_BOOKS_API_KEY", raising=False)

    app = create_app()
    settings = load_settings()

    # Use AppServiceInitializer with mock dependencies
    initializer = AppServiceInitializer(settings)
    await initializer.initialize_all_services(
        app=app,
        engine=mock_db_engine,
        catalog_base_url=catalog_base_url,
    )

    yield TestClient(app)


@pytest.fixture
def auth_headers(integration_client: TestClient) -> dict[str, str]:
    """Authorization headers for a freshly signed-up user."""
    tokens = sign_up_and_sign_in(integration_client)
    return {"Authorization": f"Bearer {tokens['accessToken']}"}
