"""Configuration management for the bookshelf system."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from .types import Environment

DEFAULT_JWT_SECRET = "bookshelf-dev-secret"


class Settings(BaseModel):
    """Application settings."""

    # Environment
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # API Settings
    api_title: str = Field(default="Bookshelf API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")

    # CORS Settings
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Database
    db_path: str | None = Field(
        default=None, description="Custom SQLite database path"
    )

    # Auth Settings
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET, description="Secret used to sign tokens"
    )
    jwt_algorithm: str = Field(default="HS256", description="Token signing algorithm")
    access_token_expires_seconds: int = Field(
        default=3600, gt=0, description="Access token lifetime in seconds"
    )
    refresh_token_expires_seconds: int = Field(
        default=3 * 3600, gt=0, description="Refresh token lifetime in seconds"
    )

    # Google Books Settings
    google_books_api_base_url: str = Field(
        default="https://www.googleapis.com/books/v1",
        description="Google Books API base URL",
    )
    google_books_api_key: str | None = Field(
        default=None, description="Optional Google Books API key"
    )
    google_books_timeout: float = Field(
        default=10.0, description="Timeout for Google Books requests in seconds"
    )
    default_max_results: int = Field(
        default=10, ge=1, le=40, description="Default number of search results"
    )

    @model_validator(mode="after")
    def validate_token_lifetimes(self) -> "Settings":
        """Refresh tokens must outlive the access tokens they renew."""
        if self.refresh_token_expires_seconds < self.access_token_expires_seconds:
            raise ValueError(
                "refresh_token_expires_seconds must be at least "
                "access_token_expires_seconds"
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    @property
    def uses_default_jwt_secret(self) -> bool:
        """Check if tokens are signed with the built-in development secret."""
        return self.jwt_secret == DEFAULT_JWT_SECRET


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    # Parse CORS origins from comma-separated string
    cors_origins_str = os.getenv("BOOKSHELF_CORS_ORIGINS", "*")
    if cors_origins_str == "*":
        cors_origins = ["*"]
    else:
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

    return Settings(
        environment=Environment(os.getenv("BOOKSHELF_ENV", "development")),
        api_title=os.getenv("BOOKSHELF_API_TITLE", "Bookshelf API"),
        api_version=os.getenv("BOOKSHELF_API_VERSION", "1.0.0"),
        cors_allow_origins=cors_origins,
        log_level=os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").upper(),
        db_path=os.getenv("BOOKSHELF_DB_PATH"),
        jwt_secret=os.getenv("BOOKSHELF_JWT_SECRET", DEFAULT_JWT_SECRET),
        jwt_algorithm=os.getenv("BOOKSHELF_JWT_ALGORITHM", "HS256"),
        access_token_expires_seconds=int(
            os.getenv("BOOKSHELF_ACCESS_TOKEN_EXPIRES", "3600")
        ),
        refresh_token_expires_seconds=int(
            os.getenv("BOOKSHELF_REFRESH_TOKEN_EXPIRES", "10800")
        ),
        google_books_api_base_url=os.getenv(
            "BOOKSHELF_GOOGLE_BOOKS_API_BASE_URL",
            "https://www.googleapis.com/books/v1",
        ),
        google_books_api_key=os.getenv("GOOGLE_BOOKS_API_KEY") or None,
        google_books_timeout=float(os.getenv("BOOKSHELF_GOOGLE_BOOKS_TIMEOUT", "10.0")),
        default_max_results=int(os.getenv("BOOKSHELF_DEFAULT_MAX_RESULTS", "10")),
    )


# Global settings instance
settings = load_settings()
