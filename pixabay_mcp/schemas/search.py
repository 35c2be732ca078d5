"""
Schemas - Search Models

Pydantic models for the search tool payload and the normalized request.
"""

from pydantic import BaseModel, Field, StrictBool, StrictInt, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError
from typing import Literal, Optional

MAX_QUERY_LENGTH = 100
MIN_PER_PAGE = 3
DEFAULT_MAX_PER_PAGE = 20

Orientation = Literal["all", "horizontal", "vertical"]


class SearchImagesInput(BaseModel):
    """
    Tool payload accepted by the Pixabay search tools.

    Unknown fields are rejected. The upper bound on ``per_page`` can be
    overridden through the validation context key ``max_per_page``.
    """
    query: str = Field(description="What the images should show (1-100 characters)")
    orientation: Optional[Orientation] = Field(
        default=None, description="all, horizontal, or vertical (default all)"
    )
    safesearch: Optional[StrictBool] = Field(
        default=None, description="Filter unsafe content (default true)"
    )
    per_page: Optional[StrictInt] = Field(
        default=None, description="Number of results (3-20, default 6)"
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("query")
    @classmethod
    def _check_query(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError(
                "query_empty",
                "Please provide a search query (1-{max_length} characters).",
                {"max_length": MAX_QUERY_LENGTH},
            )
        if len(value) > MAX_QUERY_LENGTH:
            raise PydanticCustomError(
                "query_too_long",
                "Queries must be {max_length} characters or fewer.",
                {"max_length": MAX_QUERY_LENGTH},
            )
        return value

    @field_validator("per_page")
    @classmethod
    def _check_per_page(
        cls, value: Optional[int], info: ValidationInfo
    ) -> Optional[int]:
        if value is None:
            return value
        context = info.context or {}
        max_per_page = context.get("max_per_page", DEFAULT_MAX_PER_PAGE)
        if not MIN_PER_PAGE <= value <= max_per_page:
            raise PydanticCustomError(
                "per_page_range",
                "per_page must be between {min} and {max}.",
                {"min": MIN_PER_PAGE, "max": max_per_page},
            )
        return value


class SearchRequest(SearchImagesInput):
    """Validated payload plus the locale resolved from call metadata."""
    locale: str
