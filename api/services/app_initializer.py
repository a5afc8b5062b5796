"""Application service initializer for managing startup and shutdown."""

from pathlib import Path

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from catalog.google_books import GoogleBooksClient
from core.config import Settings
from core.database.engine import create_database_engine, create_database_tables
from core.log import get_logger
from core.services import AuthService

logger = get_logger(__name__)


class AppServiceInitializer:
    """Manages initialization and lifecycle of application services."""

    def __init__(self, settings: Settings):
        """Initialize with application settings."""
        self.settings = settings
        self.engine: Engine | None = None
        self.catalog_client: GoogleBooksClient | None = None
        self.auth_service: AuthService | None = None

    async def initialize_all_services(
        self,
        app: FastAPI,
        engine: Engine | None = None,
        catalog_base_url: str | None = None,
    ) -> None:
        """Initialize all services and configure app.state."""
        logger.info("Initializing all application services...")

        await self.initialize_database(engine)
        await self.initialize_catalog(catalog_base_url)
        self.initialize_auth()
        self._setup_app_state(app)

        logger.info("All application services initialized successfully")

    async def initialize_database(self, engine: Engine | None = None) -> None:
        """Initialize database engine and create tables."""
        logger.info("Initializing database...")

        if engine:
            self.engine = engine
        else:
            db_path = Path(self.settings.db_path) if self.settings.db_path else None
            self.engine = create_database_engine(
                self.settings.environment, db_path=db_path
            )

        create_database_tables(self.engine)

        logger.info("Database initialized successfully")

    async def initialize_catalog(self, catalog_base_url: str | None = None) -> None:
        """Initialize the Google Books client."""
        base_url = catalog_base_url or self.settings.google_books_api_base_url
        if not self.settings.google_books_api_key:
            logger.warning("GOOGLE_BOOKS_API_KEY is not set; using anonymous quota")

        self.catalog_client = GoogleBooksClient(
            base_url=base_url,
            api_key=self.settings.google_books_api_key,
            timeout=self.settings.google_books_timeout,
        )
        logger.info(f"Catalog client configured for {base_url}")

    def initialize_auth(self) -> None:
        """Initialize the token issuer."""
        if self.settings.is_production and self.settings.uses_default_jwt_secret:
            logger.warning("BOOKSHELF_JWT_SECRET is not set; tokens are forgeable")

        self.auth_service = AuthService(self.settings)

    def _setup_app_state(self, app: FastAPI) -> None:
        """Configure app.state with initialized services."""
        app.state.settings = self.settings
        app.state.engine = self.engine
        app.state.catalog_client = self.catalog_client
        app.state.auth_service = self.auth_service

    async def shutdown(self) -> None:
        """Release resources held by the services."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database engine disposed")
