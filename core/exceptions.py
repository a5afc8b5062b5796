"""Domain exceptions for the bookshelf system."""


class BookshelfError(Exception):
    """Base exception for bookshelf errors."""

    pass


class UnauthorizedError(BookshelfError):
    """Raised on bad credentials or an invalid, expired or wrong-scope token."""

    pass


class AlreadyExistsError(BookshelfError):
    """Raised when creating a record that must be unique."""

    pass


class NotFoundError(BookshelfError):
    """Raised when operating on a record that does not exist."""

    pass


class UpstreamUnavailableError(BookshelfError):
    """Raised when the book catalog cannot serve a request."""

    pass
