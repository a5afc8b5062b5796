"""Constants for the Google Books client."""

GOOGLE_BOOKS_API_BASE_URL = "https://www.googleapis.com/books/v1"

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RESULTS = 10
# Hard limit enforced by the volumes endpoint
MAX_RESULTS_LIMIT = 40

DEFAULT_USER_AGENT = "bookshelf/0.1.0"
