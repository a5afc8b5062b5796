"""Custom exceptions for the Google Books client."""


class CatalogError(Exception):
    """Base exception for catalog errors."""

    pass


class CatalogNotFoundError(CatalogError):
    """Raised when a volume is not found in the catalog."""

    pass


class CatalogAPIError(CatalogError):
    """Raised when the catalog API returns an error or cannot be reached."""

    pass


class CatalogTimeoutError(CatalogError):
    """Raised when a catalog request times out."""

    pass
