"""
Services - Search Service

One tool invocation end to end: validate, normalize, call Pixabay, present.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional

from pixabay_mcp.config import get_settings
from pixabay_mcp.schemas.search import SearchRequest
from pixabay_mcp.services.pixabay_client import PixabayClient
from pixabay_mcp.services.presenter import ToolResponse, present_images, present_media
from pixabay_mcp.services.query import (
    build_search_request,
    parse_search_request,
    resolve_locale,
)

logger = logging.getLogger(__name__)


class SearchService:
    """Runs Pixabay searches for the MCP tools."""

    def __init__(self, settings=None, client: Optional[PixabayClient] = None):
        self.settings = settings or get_settings()
        self.client = client or PixabayClient(self.settings)

    def prepare(
        self,
        arguments: Any,
        meta: Optional[Mapping[str, Any]] = None,
    ) -> SearchRequest:
        """
        Validate tool arguments and attach the caller's locale.

        Raises:
            InvalidSearchRequest: Before any network activity
        """
        pixabay = self.settings.pixabay
        locale = resolve_locale(meta, pixabay.default_locale)
        search_input = parse_search_request(arguments, max_per_page=pixabay.max_per_page)
        return build_search_request(search_input, locale)

    async def search_images(
        self,
        arguments: Any,
        meta: Optional[Mapping[str, Any]] = None,
    ) -> ToolResponse:
        """
        Image search tool body.

        Args:
            arguments: Raw tool arguments
            meta: Call metadata carrying the locale hint

        Returns:
            ToolResponse for the host
        """
        request = self.prepare(arguments, meta)
        result = await self.client.search_images(request)
        logger.info(
            "Image search %r: %d result(s), %d total hit(s)",
            request.query, len(result.results), result.total_hits,
        )
        return present_images(request.query, request.locale, result)

    async def search_media(
        self,
        arguments: Any,
        meta: Optional[Mapping[str, Any]] = None,
    ) -> ToolResponse:
        """
        Image and video search, issued concurrently.

        Either request failing fails the whole invocation, and the other
        request is cancelled before the error propagates.
        """
        request = self.prepare(arguments, meta)
        tasks = [
            asyncio.ensure_future(self.client.search_images(request)),
            asyncio.ensure_future(self.client.search_videos(request)),
        ]
        try:
            images, videos = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        logger.info(
            "Media search %r: %d image(s), %d video(s)",
            request.query, len(images.results), len(videos.results),
        )
        return present_media(request.query, request.locale, images, videos)
