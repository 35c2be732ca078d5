"""
Schemas - Media Models

Pydantic models for mapped search results and tool output.
Serialise with ``by_alias=True`` to get the camelCase wire names.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union

IMAGE_ATTRIBUTION = "Images provided by Pixabay under the Pixabay License."
MEDIA_ATTRIBUTION = "Images and videos provided by Pixabay under the Pixabay License."

Number = Union[int, float]


class CamelModel(BaseModel):
    """Frozen model with camelCase aliases."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Contributor(CamelModel):
    """Pixabay user credited for a result."""
    name: str
    profile_url: str


class ImageResult(CamelModel):
    """Single image result."""
    id: int
    preview_url: str
    page_url: str
    image_url: str
    image_width: Number
    image_height: Number
    tags: List[str] = []
    photographer: Contributor
    likes: Number
    downloads: Number


class VideoResult(CamelModel):
    """Single video result, using the best available rendition."""
    id: int
    page_url: str
    video_url: str
    preview_image_url: Optional[str] = None
    width: Optional[Number] = None
    height: Optional[Number] = None
    duration_seconds: Number
    tags: List[str] = []
    creator: Contributor
    likes: Optional[Number] = None
    downloads: Optional[Number] = None


class RateLimitInfo(CamelModel):
    """Rate-limit headers from the last upstream response. ``None`` means unknown."""
    limit: Optional[Number] = None
    remaining: Optional[Number] = None
    reset_seconds: Optional[Number] = None


class ImageSearchResult(CamelModel):
    """Mapped image search response."""
    results: List[ImageResult]
    total_hits: int
    rate_limit: RateLimitInfo = Field(default_factory=RateLimitInfo)


class VideoSearchResult(CamelModel):
    """Mapped video search response."""
    results: List[VideoResult]
    total_hits: int
    rate_limit: RateLimitInfo = Field(default_factory=RateLimitInfo)


class ImageSearchStructuredContent(CamelModel):
    """Structured output of the image search tool."""
    query: str
    result_count: int
    total_hits: int
    results: List[ImageResult]
    attribution: str = IMAGE_ATTRIBUTION


class MediaSearchStructuredContent(CamelModel):
    """Structured output of the combined image and video search tool."""
    query: str
    image_count: int
    video_count: int
    total_image_hits: int
    total_video_hits: int
    images: List[ImageResult]
    videos: List[VideoResult]
    attribution: str = MEDIA_ATTRIBUTION
