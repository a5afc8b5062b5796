"""Google Books catalog client."""

from .client import GoogleBooksClient
from .exceptions import (
    CatalogAPIError,
    CatalogError,
    CatalogNotFoundError,
    CatalogTimeoutError,
)

__all__ = [
    "GoogleBooksClient",
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogAPIError",
    "CatalogTimeoutError",
]
