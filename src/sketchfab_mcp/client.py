"""
Sketchfab API client.

Provides async methods for the search, model and download endpoints of the
Sketchfab v3 API, mapping HTTP failures onto the errors in
``sketchfab_mcp.errors``. Each method issues exactly one request; nothing
is retried.
"""

import logging
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import httpx

from . import __version__
from .auth import auth_headers, redact_token
from .config import SketchfabConfig
from .errors import (
    DownloadError,
    DownloadForbiddenError,
    InvalidApiKeyError,
    ModelNotDownloadableError,
    ModelNotFoundError,
    RateLimitError,
    SketchfabAPIError,
    SketchfabError,
    SketchfabTransportError,
)
from .models import DownloadLinks, SearchResults, SketchfabModel

logger = logging.getLogger(__name__)

MAX_SEARCH_COUNT = 24
DEFAULT_SEARCH_COUNT = 10

StatusMap = Dict[int, Callable[[], SketchfabError]]


class SketchfabClient:
    """
    Async client for the Sketchfab v3 API.

    Catalog calls carry the ``Token`` Authorization header and use
    ``config.request_timeout``. Signed download URLs are fetched without
    credentials under ``config.download_timeout``.
    """

    def __init__(
        self,
        config: SketchfabConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not config.api_key:
            raise ValueError("SketchfabClient requires a configured API key")
        self.config = config
        self.base_url = config.api_base
        self.client = httpx.AsyncClient(
            timeout=config.request_timeout,
            headers={"User-Agent": f"sketchfab-mcp/{__version__}"},
            follow_redirects=True,
            transport=transport,
        )

    def _get_headers(self) -> Dict[str, str]:
        assert self.config.api_key is not None
        return auth_headers(self.config.api_key)

    async def _get_json(self, endpoint: str, errors: StatusMap, **kwargs: Any) -> Any:
        """
        Make an authenticated GET request and decode the JSON body.

        Args:
            endpoint: Path below the API base
            errors: Status codes mapped to the error they raise
            **kwargs: Extra arguments for ``httpx.AsyncClient.get``

        Raises:
            SketchfabError: For any non-2xx response or transport failure
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = await self.client.get(url, headers=self._get_headers(), **kwargs)
        except httpx.RequestError as e:
            raise SketchfabTransportError(e) from e

        if response.is_success:
            return response.json()

        status = response.status_code
        logger.debug(
            "GET %s failed with %s (key %s)",
            url,
            status,
            redact_token(self.config.api_key or ""),
        )
        if status in errors:
            raise errors[status]()
        raise SketchfabAPIError(status, response.reason_phrase)

    async def search_models(
        self,
        q: Optional[str] = None,
        tags: Optional[List[str]] = None,
        categories: Optional[List[str]] = None,
        downloadable: Optional[bool] = None,
        count: Optional[int] = None,
    ) -> SearchResults:
        """
        Search Sketchfab models.

        Args:
            q: Free-text query
            tags: Tag slugs to filter on
            categories: Category slugs to filter on
            downloadable: Restrict to downloadable models when set
            count: Page size, clamped to 24; defaults to 10

        Returns:
            Search page with results and pagination cursors
        """
        params: Dict[str, Any] = {"type": "models"}
        if q:
            params["q"] = q
        if tags:
            params["tags"] = list(tags)
        if categories:
            params["categories"] = list(categories)
        if downloadable is not None:
            params["downloadable"] = downloadable
        params["count"] = clamp_count(count)

        data = await self._get_json(
            "/search",
            {401: InvalidApiKeyError, 429: RateLimitError},
            params=params,
        )
        return SearchResults.model_validate(data)

    async def get_model(self, uid: str) -> SketchfabModel:
        """
        Get model metadata.

        Args:
            uid: Sketchfab model UID

        Returns:
            Parsed catalog entry
        """
        data = await self._get_json(
            f"/models/{quote(uid, safe='')}",
            {404: lambda: ModelNotFoundError(uid), 401: InvalidApiKeyError},
        )
        return SketchfabModel.model_validate(data)

    async def get_download_links(self, uid: str) -> DownloadLinks:
        """
        Get signed download URLs for a model.

        Args:
            uid: Sketchfab model UID

        Returns:
            Download descriptor keyed by archive format
        """
        data = await self._get_json(
            f"/models/{quote(uid, safe='')}/download",
            {
                404: lambda: ModelNotFoundError(uid),
                401: InvalidApiKeyError,
                400: ModelNotDownloadableError,
                403: DownloadForbiddenError,
            },
        )
        return DownloadLinks.model_validate(data)

    async def download_bytes(self, url: str) -> bytes:
        """
        Fetch a model archive from a signed URL.

        Args:
            url: Pre-signed URL from the download descriptor

        Returns:
            Raw archive bytes
        """
        try:
            response = await self.client.get(url, timeout=self.config.download_timeout)
        except httpx.RequestError as e:
            raise SketchfabTransportError(e) from e

        if not response.is_success:
            raise DownloadError(response.status_code, response.reason_phrase)
        return response.content

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "SketchfabClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def clamp_count(count: Optional[int]) -> int:
    """Return the page size sent upstream: 1..24, defaulting to 10."""
    if not count or count < 1:
        return DEFAULT_SEARCH_COUNT
    return min(count, MAX_SEARCH_COUNT)
