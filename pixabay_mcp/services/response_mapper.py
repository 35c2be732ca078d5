"""
Services - Response Mapper

Turns raw Pixabay JSON into ImageResult / VideoResult lists.

Each hit is validated on its own. A hit that fails validation, or a video
without a playable rendition, is dropped; the rest of the response is kept.
"""

import logging
import math
import re
from typing import Any, List, Optional, Sequence, Tuple
from urllib.parse import quote

from pydantic import ValidationError

from pixabay_mcp.schemas.media import Contributor, ImageResult, VideoResult
from pixabay_mcp.schemas.pixabay import PixabayImageHit, PixabayVideoHit, VideoRendition

logger = logging.getLogger(__name__)

VIDEO_RENDITION_ORDER = ("medium", "large", "small", "tiny")
THUMBNAIL_RENDITION_ORDER = ("medium", "small", "large", "tiny")

_HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)
# Characters left unescaped in contributor profile URLs.
_PROFILE_SAFE_CHARS = "!~*'()"


def sanitize_url(value: Any) -> Optional[str]:
    """Return the trimmed value if it is an absolute http(s) URL, else None."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed or not _HTTP_URL.match(trimmed):
        return None
    return trimmed


def normalize_tags(tags: str) -> List[str]:
    """Split a comma-separated tag string, keeping upstream order."""
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def build_contributor_profile(username: str, user_id: int) -> str:
    return f"https://pixabay.com/users/{quote(username, safe=_PROFILE_SAFE_CHARS)}-{user_id}/"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _finite_or_none(value: Any):
    if _is_number(value) and math.isfinite(value):
        return value
    return None


def _extract_hits(body: Any) -> Sequence[Any]:
    if not isinstance(body, dict):
        return []
    hits = body.get("hits")
    return hits if isinstance(hits, list) else []


def _total_hits(body: Any, fallback: int) -> int:
    total = body.get("totalHits") if isinstance(body, dict) else None
    if isinstance(total, int) and not isinstance(total, bool):
        return total
    return fallback


def map_image_hit(hit: PixabayImageHit) -> ImageResult:
    return ImageResult(
        id=hit.id,
        preview_url=hit.previewURL,
        page_url=hit.pageURL,
        image_url=hit.webformatURL,
        image_width=hit.imageWidth,
        image_height=hit.imageHeight,
        tags=normalize_tags(hit.tags),
        photographer=Contributor(
            name=hit.user,
            profile_url=build_contributor_profile(hit.user, hit.user_id),
        ),
        likes=hit.likes,
        downloads=hit.downloads,
    )


def pick_video_rendition(hit: PixabayVideoHit) -> Optional[VideoRendition]:
    """First rendition, in priority order, with a usable URL."""
    for key in VIDEO_RENDITION_ORDER:
        rendition = hit.videos.get(key)
        if rendition is not None and sanitize_url(rendition.url):
            return rendition
    return None


def find_thumbnail(hit: PixabayVideoHit, preferred: Any = None) -> Optional[str]:
    """Preferred thumbnail if usable, else the first usable one by rendition."""
    preferred_url = sanitize_url(preferred)
    if preferred_url:
        return preferred_url

    for key in THUMBNAIL_RENDITION_ORDER:
        rendition = hit.videos.get(key)
        if rendition is None:
            continue
        thumbnail = sanitize_url(rendition.thumbnail)
        if thumbnail:
            return thumbnail
    return None


def map_video_hit(hit: PixabayVideoHit) -> Optional[VideoResult]:
    """Map a video hit, or return None when it has no playable rendition."""
    rendition = pick_video_rendition(hit)
    if rendition is None:
        return None

    return VideoResult(
        id=hit.id,
        page_url=hit.pageURL,
        video_url=sanitize_url(rendition.url),
        preview_image_url=find_thumbnail(hit, rendition.thumbnail),
        width=_finite_or_none(rendition.width),
        height=_finite_or_none(rendition.height),
        duration_seconds=hit.duration,
        tags=normalize_tags(hit.tags),
        creator=Contributor(
            name=hit.user,
            profile_url=build_contributor_profile(hit.user, hit.user_id),
        ),
        likes=hit.likes if _is_number(hit.likes) else None,
        downloads=hit.downloads if _is_number(hit.downloads) else None,
    )


def map_image_response(body: Any) -> Tuple[List[ImageResult], int]:
    """
    Map an image search body.

    Args:
        body: Decoded JSON from the image endpoint

    Returns:
        (results, total_hits)
    """
    results: List[ImageResult] = []
    dropped = 0
    for raw_hit in _extract_hits(body):
        try:
            hit = PixabayImageHit.model_validate(raw_hit)
        except ValidationError as e:
            dropped += 1
            logger.debug("Dropping image hit: %s", e.errors(include_url=False))
            continue
        results.append(map_image_hit(hit))

    if dropped:
        logger.debug("Dropped %d malformed image hit(s)", dropped)
    return results, _total_hits(body, len(results))


def map_video_response(body: Any) -> Tuple[List[VideoResult], int]:
    """
    Map a video search body.

    Args:
        body: Decoded JSON from the video endpoint

    Returns:
        (results, total_hits)
    """
    results: List[VideoResult] = []
    dropped = 0
    for raw_hit in _extract_hits(body):
        try:
            hit = PixabayVideoHit.model_validate(raw_hit)
        except ValidationError as e:
            dropped += 1
            logger.debug("Dropping video hit: %s", e.errors(include_url=False))
            continue

        result = map_video_hit(hit)
        if result is None:
            dropped += 1
            logger.debug("Dropping video hit %s: no playable rendition", hit.id)
            continue
        results.append(result)

    if dropped:
        logger.debug("Dropped %d malformed video hit(s)", dropped)
    return results, _total_hits(body, len(results))
