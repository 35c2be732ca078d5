"""
Schemas - Pixabay Upstream Models

Pydantic models for raw Pixabay hits. Only the fields declared here are
trusted; a hit that fails validation is dropped by the response mapper.
"""

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    StrictFloat,
    StrictInt,
    TypeAdapter,
)
from typing import Annotated, Any, Dict, Literal, Optional, Union

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; keep the upstream string byte-for-byte.
    _URL_ADAPTER.validate_python(value)
    return value


WebUrl = Annotated[str, AfterValidator(_check_url)]
Number = Union[StrictInt, StrictFloat]


class PixabayImageHit(BaseModel):
    """Image hit from ``GET /api/``."""
    id: StrictInt
    pageURL: WebUrl
    previewURL: WebUrl
    webformatURL: WebUrl
    imageWidth: Number
    imageHeight: Number
    tags: str
    user: str
    user_id: StrictInt
    userImageURL: Optional[Union[WebUrl, Literal[""]]] = None
    likes: Number
    downloads: Number

    model_config = {"frozen": True}


class VideoRendition(BaseModel):
    """One encoding of a video. Every field is checked by the mapper."""
    url: Any = None
    width: Any = None
    height: Any = None
    size: Any = None
    thumbnail: Any = None

    model_config = {"frozen": True}


class PixabayVideoHit(BaseModel):
    """Video hit from ``GET /api/videos/``."""
    id: StrictInt
    pageURL: WebUrl
    tags: str
    duration: Number
    user: str
    user_id: StrictInt
    likes: Any = None
    downloads: Any = None
    videos: Dict[str, Optional[VideoRendition]]

    model_config = {"frozen": True}
