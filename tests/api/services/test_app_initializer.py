"""Tests for the application service initializer."""

import logging

import pytest
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from api.services.app_initializer import AppServiceInitializer
from catalog.google_books import GoogleBooksClient
from core.config import Settings
from core.services import AuthService
from core.types import Environment


@pytest.mark.asyncio
async def test_initialize_all_services(
    mock_db_engine: Engine, catalog_base_url: str
) -> None:
    """Test services are created and stored on app.state."""
    app = FastAPI()
    settings = Settings(environment=Environment.TESTING, jwt_secret="x")
    initializer = AppServiceInitializer(settings)

    await initializer.initialize_all_services(
        app, engine=mock_db_engine, catalog_base_url=catalog_base_url
    )

    assert app.state.settings is settings
    assert app.state.engine is mock_db_engine
    assert isinstance(app.state.catalog_client, GoogleBooksClient)
    assert app.state.catalog_client.base_url == catalog_base_url
    assert isinstance(app.state.auth_service, AuthService)


@pytest.mark.asyncio
async def test_initialize_database_from_settings() -> None:
    """Test the engine is built from settings when none is injected."""
    initializer = AppServiceInitializer(Settings(environment=Environment.TESTING))

    await initializer.initialize_database()

    assert initializer.engine is not None
    assert initializer.engine.url.database == ":memory:"
    await initializer.shutdown()


@pytest.mark.asyncio
async def test_catalog_uses_settings(caplog: pytest.LogCaptureFixture) -> None:
    """Test the catalog client follows settings and warns without a key."""
    settings = Settings(
        google_books_api_base_url="https://books.example.com/v1",
        google_books_timeout=3.0,
    )
    initializer = AppServiceInitializer(settings)

    with caplog.at_level(logging.WARNING):
        await initializer.initialize_catalog()

    assert initializer.catalog_client is not None
    assert initializer.catalog_client.base_url == "https://books.example.com/v1"
    assert initializer.catalog_client.timeout == 3.0
    assert "GOOGLE_BOOKS_API_KEY" in caplog.text


def test_default_secret_warning_in_production(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test production warns about the built-in signing secret."""
    initializer = AppServiceInitializer(Settings(environment=Environment.PRODUCTION))

    with caplog.at_level(logging.WARNING):
        initializer.initialize_auth()

    assert initializer.auth_service is not None
    assert "BOOKSHELF_JWT_SECRET" in caplog.text
