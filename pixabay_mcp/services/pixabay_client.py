"""
Services - Pixabay Client

Builds upstream query parameters, calls the Pixabay REST API, and
classifies failures. Response bodies are handed to the response mapper.
"""

import logging
import math
from typing import Any, Dict, Optional

import httpx

from pixabay_mcp.config import get_settings
from pixabay_mcp.schemas.media import ImageSearchResult, RateLimitInfo, VideoSearchResult
from pixabay_mcp.schemas.search import SearchRequest
from pixabay_mcp.services.errors import (
    AuthenticationFailed,
    RateLimited,
    UpstreamRequestFailed,
)
from pixabay_mcp.services.query import resolve_language
from pixabay_mcp.services.response_mapper import map_image_response, map_video_response

logger = logging.getLogger(__name__)

RATE_LIMIT_HEADERS = {
    "limit": "x-ratelimit-limit",
    "remaining": "x-ratelimit-remaining",
    "reset_seconds": "x-ratelimit-reset",
}


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def build_video_params(request: SearchRequest, pixabay) -> Dict[str, str]:
    """
    Query parameters shared by both endpoints.

    Args:
        request: Normalized search request
        pixabay: PixabaySettings

    Returns:
        Ordered parameter dict, API key included
    """
    safesearch = True if request.safesearch is None else request.safesearch
    per_page = request.per_page or pixabay.default_per_page
    return {
        "key": pixabay.api_key,
        "q": request.query,
        "safesearch": _bool_param(safesearch),
        "per_page": str(per_page),
        "lang": resolve_language(request.locale, pixabay.default_locale),
    }


def build_image_params(request: SearchRequest, pixabay) -> Dict[str, str]:
    """Video parameters plus the photo-only image type and orientation."""
    params = build_video_params(request, pixabay)
    params["image_type"] = "photo"
    params["orientation"] = request.orientation or "all"
    return params


def parse_rate_limit_header(value: Optional[str]):
    """Finite number from a header value, or None when absent or garbage."""
    if not value:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return int(parsed) if parsed.is_integer() else parsed


def extract_rate_limit(headers: httpx.Headers) -> RateLimitInfo:
    return RateLimitInfo(**{
        field: parse_rate_limit_header(headers.get(header))
        for field, header in RATE_LIMIT_HEADERS.items()
    })


def _read_error_body(response: httpx.Response) -> str:
    try:
        text = response.text.strip()
    except (httpx.StreamError, UnicodeDecodeError, LookupError):
        return response.reason_phrase
    return text or response.reason_phrase


def raise_for_error_response(response: httpx.Response) -> None:
    """
    Classify a non-success response.

    Raises:
        AuthenticationFailed: 401 or 403
        RateLimited: 429
        UpstreamRequestFailed: Any other non-2xx status
    """
    if response.is_success:
        return

    logger.warning("Pixabay responded with HTTP %d", response.status_code)
    if response.status_code in (401, 403):
        raise AuthenticationFailed()
    if response.status_code == 429:
        raise RateLimited()
    raise UpstreamRequestFailed(
        _read_error_body(response), status_code=response.status_code
    )


class PixabayClient:
    """Async client for the Pixabay image and video search endpoints."""

    def __init__(self, settings=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.pixabay = self.settings.pixabay
        self._transport = transport

    async def search_images(self, request: SearchRequest) -> ImageSearchResult:
        """
        Search photos.

        Args:
            request: Normalized search request

        Returns:
            ImageSearchResult with mapped hits and rate-limit info
        """
        params = build_image_params(request, self.pixabay)
        body, rate_limit = await self._get(self.pixabay.base_url, params)
        results, total_hits = map_image_response(body)
        return ImageSearchResult(
            results=results, total_hits=total_hits, rate_limit=rate_limit
        )

    async def search_videos(self, request: SearchRequest) -> VideoSearchResult:
        """
        Search videos.

        Args:
            request: Normalized search request

        Returns:
            VideoSearchResult with mapped hits and rate-limit info
        """
        params = build_video_params(request, self.pixabay)
        body, rate_limit = await self._get(self.pixabay.video_base_url, params)
        results, total_hits = map_video_response(body)
        return VideoSearchResult(
            results=results, total_hits=total_hits, rate_limit=rate_limit
        )

    async def _get(self, url: str, params: Dict[str, str]):
        # Task cancellation aborts the in-flight request; CancelledError is not caught.
        logger.debug(
            "GET %s q=%r lang=%s per_page=%s",
            url, params["q"], params["lang"], params["per_page"],
        )
        async with httpx.AsyncClient(
            timeout=self.pixabay.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(
                    url, params=params, headers={"Accept": "application/json"}
                )
            except httpx.RequestError as e:
                logger.warning("Pixabay request failed: %s", type(e).__name__)
                raise UpstreamRequestFailed(str(e) or type(e).__name__) from e

        rate_limit = extract_rate_limit(response.headers)
        raise_for_error_response(response)

        try:
            body: Any = response.json()
        except ValueError as e:
            raise UpstreamRequestFailed(
                "response body is not valid JSON", status_code=response.status_code
            ) from e
        return body, rate_limit
