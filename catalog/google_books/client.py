"""Google Books API client for catalog lookups."""

from typing import Any
from urllib.parse import quote

import httpx

from core.log import get_logger
from .constants import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GOOGLE_BOOKS_API_BASE_URL,
)
from .exceptions import (
    CatalogAPIError,
    CatalogNotFoundError,
    CatalogTimeoutError,
)

logger = get_logger(__name__)


class GoogleBooksClient:
    """Read-only client for the Google Books volumes API.

    Responses are returned as decoded JSON without caching or retries.
    Each call opens its own ``httpx.AsyncClient`` so the client can be shared
    across requests served by different event loops.
    """

    def __init__(
        self,
        base_url: str = GOOGLE_BOOKS_API_BASE_URL,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize Google Books client.

        Args:
            base_url: Base URL of the Google Books API (without ``/volumes``)
            api_key: Optional API key sent as the ``key`` query parameter
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _build_params(self, **params: Any) -> httpx.QueryParams:
        if self.api_key:
            params["key"] = self.api_key
        return httpx.QueryParams(params)

    async def _get_json(
        self, path: str, params: httpx.QueryParams, resource: str
    ) -> dict[str, Any]:
        """GET ``path`` and decode the JSON body.

        Args:
            path: Path relative to the base URL
            params: Query parameters
            resource: Human-readable name of the resource, used in errors

        Raises:
            CatalogNotFoundError: If the catalog answers 404
            CatalogAPIError: On other HTTP errors, transport errors or bad JSON
            CatalogTimeoutError: If the request times out
        """
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": DEFAULT_USER_AGENT},
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.warning(f"{resource} not found")
                raise CatalogNotFoundError(f"{resource} not found")
            logger.error(f"HTTP error fetching {resource}: {e}")
            raise CatalogAPIError(f"HTTP {e.response.status_code}: {e}")

        except httpx.TimeoutException:
            logger.error(f"Timeout fetching {resource}")
            raise CatalogTimeoutError(f"Timeout fetching {resource}")

        except httpx.RequestError as e:
            logger.error(f"Request error fetching {resource}: {e}")
            raise CatalogAPIError(f"Request failed: {e}")

        except ValueError as e:
            logger.error(f"Invalid JSON for {resource}: {e}")
            raise CatalogAPIError(f"Invalid response for {resource}")

        if not isinstance(data, dict):
            raise CatalogAPIError(f"Unexpected response for {resource}")
        return data

    async def search(
        self, query: str, max_results: int = DEFAULT_MAX_RESULTS
    ) -> dict[str, Any]:
        """Search volumes by free text.

        Args:
            query: Free-text query (Google Books ``q`` syntax)
            max_results: Number of items to request

        Returns:
            Dict with ``totalItems`` and ``items`` as returned by the provider
        """
        logger.info(f"Searching catalog: q={query!r} maxResults={max_results}")
        params = self._build_params(q=query, maxResults=max_results)
        data = await self._get_json("/volumes", params, f"Search '{query}'")

        return {
            "totalItems": data.get("totalItems", 0),
            "items": data.get("items", []),
        }

    async def get_volume(self, volume_id: str) -> dict[str, Any]:
        """Fetch a single volume by its catalog ID.

        Raises:
            ValueError: If the volume ID is blank
            CatalogNotFoundError: If the volume does not exist
        """
        if not volume_id.strip():
            raise ValueError("Volume ID must not be empty")

        logger.info(f"Fetching volume: {volume_id}")
        path = f"/volumes/{quote(volume_id, safe='')}"
        data = await self._get_json(path, self._build_params(), f"Book {volume_id}")

        # The API sometimes answers an unknown ID with an error object
        if "error" in data and "volumeInfo" not in data:
            raise CatalogNotFoundError(f"Book {volume_id} not found")
        return data
