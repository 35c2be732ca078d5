"""
Services - Result Presenter

Summary text, structured content, and response metadata for tool output.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pixabay_mcp.schemas.media import (
    ImageSearchResult,
    ImageSearchStructuredContent,
    MediaSearchStructuredContent,
    RateLimitInfo,
    VideoSearchResult,
)

NOT_FOUND_HINT = "Try a different description or add more detail."


@dataclass(frozen=True)
class ToolResponse:
    """Everything a tool returns to the MCP host."""
    summary: str
    structured_content: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def join_with_and(parts: List[str]) -> str:
    """``["a"]`` -> ``a``; ``["a", "b", "c"]`` -> ``a, b and c``."""
    if len(parts) <= 1:
        return "".join(parts)
    return f"{', '.join(parts[:-1])} and {parts[-1]}"


def image_summary(query: str, count: int) -> str:
    if count > 0:
        return f'Found {_plural(count, "Pixabay image")} for "{query}".'
    return f'No Pixabay images found for "{query}". {NOT_FOUND_HINT}'


def media_summary(query: str, image_count: int, video_count: int) -> str:
    parts = []
    if image_count > 0:
        parts.append(_plural(image_count, "image"))
    if video_count > 0:
        parts.append(_plural(video_count, "video"))
    if not parts:
        return f'No Pixabay images or videos found for "{query}". {NOT_FOUND_HINT}'
    return f'Found {join_with_and(parts)} on Pixabay for "{query}".'


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json")


def _rate_limit_meta(rate_limit: RateLimitInfo) -> Dict[str, Any]:
    return rate_limit.model_dump(by_alias=True, mode="json", exclude_none=True)


def present_images(query: str, locale: str, result: ImageSearchResult) -> ToolResponse:
    """
    Assemble the image search tool response.

    Args:
        query: Normalized query
        locale: Locale hint taken from call metadata
        result: Mapped image search result

    Returns:
        ToolResponse
    """
    content = ImageSearchStructuredContent(
        query=query,
        result_count=len(result.results),
        total_hits=result.total_hits,
        results=result.results,
    )
    return ToolResponse(
        summary=image_summary(query, content.result_count),
        structured_content=_dump(content),
        meta={
            "openai/locale": locale,
            "rateLimit": _rate_limit_meta(result.rate_limit),
        },
    )


def present_media(
    query: str,
    locale: str,
    images: ImageSearchResult,
    videos: VideoSearchResult,
) -> ToolResponse:
    """Assemble the combined image and video tool response."""
    content = MediaSearchStructuredContent(
        query=query,
        image_count=len(images.results),
        video_count=len(videos.results),
        total_image_hits=images.total_hits,
        total_video_hits=videos.total_hits,
        images=images.results,
        videos=videos.results,
    )
    return ToolResponse(
        summary=media_summary(query, content.image_count, content.video_count),
        structured_content=_dump(content),
        meta={
            "openai/locale": locale,
            "rateLimit": {
                "images": _rate_limit_meta(images.rate_limit),
                "videos": _rate_limit_meta(videos.rate_limit),
            },
        },
    )
