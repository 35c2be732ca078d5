"""
Schemas Module - Pydantic Models

Data models for search requests, Pixabay hits, and tool output.
"""

from pixabay_mcp.schemas.search import SearchImagesInput, SearchRequest
from pixabay_mcp.schemas.pixabay import PixabayImageHit, PixabayVideoHit, VideoRendition
from pixabay_mcp.schemas.media import (
    Contributor,
    ImageResult,
    VideoResult,
    RateLimitInfo,
    ImageSearchResult,
    VideoSearchResult,
    ImageSearchStructuredContent,
    MediaSearchStructuredContent,
)

__all__ = [
    "SearchImagesInput",
    "SearchRequest",
    "PixabayImageHit",
    "PixabayVideoHit",
    "VideoRendition",
    "Contributor",
    "ImageResult",
    "VideoResult",
    "RateLimitInfo",
    "ImageSearchResult",
    "VideoSearchResult",
    "ImageSearchStructuredContent",
    "MediaSearchStructuredContent",
]
