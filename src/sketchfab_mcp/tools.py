"""
Tool handlers for the Sketchfab MCP server.

Each handler validates its preconditions, performs one to three API calls
and returns plain text. Failures never escape a handler; they are logged and
rendered as a prefixed message instead.
"""

import logging
from typing import Callable, List, Optional, Union

from .auth import MISSING_API_KEY_MESSAGE
from .client import SketchfabClient
from .config import SketchfabConfig
from .formatting import format_model_for_display, format_search_results, resolve_download_path
from .models import ModelFormat

logger = logging.getLogger(__name__)

ClientFactory = Callable[[SketchfabConfig], SketchfabClient]

MISSING_SEARCH_PARAMS_MESSAGE = (
    "Please provide at least one search parameter: query, tags, or categories."
)
NO_RESULTS_MESSAGE = (
    "No models found matching your search criteria. Try different keywords or filters."
)
NO_FORMATS_MESSAGE = "No download formats available for this model."


class SketchfabTools:
    """
    The search, model-details and download operations bound to one config.

    Args:
        config: Immutable server configuration, resolved once at startup
        client_factory: Builds an API client per call; tests inject fakes here
    """

    def __init__(self, config: SketchfabConfig, client_factory: ClientFactory = SketchfabClient):
        self.config = config
        self.client_factory = client_factory

    def _client(self) -> SketchfabClient:
        return self.client_factory(self.config)

    async def search(
        self,
        query: Optional[str] = None,
        tags: Optional[List[str]] = None,
        categories: Optional[List[str]] = None,
        downloadable: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> str:
        """Search for models and return a numbered listing."""
        try:
            if not query and not tags and not categories:
                return MISSING_SEARCH_PARAMS_MESSAGE

            if not self.config.has_api_key:
                return MISSING_API_KEY_MESSAGE

            async with self._client() as client:
                search = await client.search_models(
                    q=query,
                    tags=tags,
                    categories=categories,
                    downloadable=downloadable,
                    count=limit,
                )

            if not search.results:
                return NO_RESULTS_MESSAGE

            return format_search_results(search)
        except Exception as e:
            logger.warning("Sketchfab search failed: %s", e)
            return f"Error searching Sketchfab: {_message(e)}"

    async def model_details(self, model_id: str) -> str:
        """Fetch one model and render its details block."""
        try:
            if not self.config.has_api_key:
                return MISSING_API_KEY_MESSAGE

            async with self._client() as client:
                model = await client.get_model(model_id)

            return format_model_for_display(model)
        except Exception as e:
            logger.warning("Fetching model %s failed: %s", model_id, e)
            return f"Error getting model details: {_message(e)}"

    async def download(
        self,
        model_id: str,
        format: Union[ModelFormat, str, None] = ModelFormat.GLTF,
        output_path: Optional[str] = None,
    ) -> str:
        """
        Download a model archive to disk.

        When the requested format is missing, the first available format in
        gltf > glb > usdz > source order is used instead and the response says
        so. An existing file at the destination is overwritten.
        """
        try:
            if not self.config.has_api_key:
                return MISSING_API_KEY_MESSAGE

            requested = ModelFormat(format or ModelFormat.GLTF)

            async with self._client() as client:
                model = await client.get_model(model_id)
                if not model.is_downloadable:
                    return f'Model "{model.name}" is not downloadable.'

                links = await client.get_download_links(model_id)

                used = requested
                if links.get(requested) is None:
                    fallback = links.first_available()
                    if fallback is None:
                        return NO_FORMATS_MESSAGE
                    used = fallback

                link = links.get(used)
                assert link is not None
                data = await client.download_bytes(link.url)

            save_path = resolve_download_path(model, model_id, used, output_path)
            save_path.write_bytes(data)
            logger.info("Saved %s (%d bytes) to %s", model_id, len(data), save_path)

            if used == requested:
                summary = f'Downloaded model "{model.name}" in {used.value} format.'
            else:
                summary = (
                    f'Downloaded model "{model.name}" in {used.value} format '
                    f"(requested {requested.value} was not available)."
                )
            return f"{summary}\nSaved to: {save_path}"
        except Exception as e:
            logger.warning("Downloading model %s failed: %s", model_id, e)
            return f"Error downloading model: {_message(e)}"


def _message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)
