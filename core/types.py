"""Common type definitions for the bookshelf system."""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class BookState(str, Enum):
    """Reading state of a book on a user's list."""

    WANTS_TO_READ = "WANTS_TO_READ"
    IS_READING = "IS_READING"
    READ = "READ"


class TokenScope(str, Enum):
    """Scopes carried by issued tokens."""

    ACCESS = "accessToken"
    REFRESH = "refreshToken"
