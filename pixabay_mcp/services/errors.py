"""
Services - Errors

Errors surfaced to the MCP host. ``ToolError`` messages are passed through
to the caller verbatim by FastMCP.
"""

from typing import Optional

from fastmcp.exceptions import ToolError


class PixabayError(ToolError):
    """Base class for errors that terminate a tool invocation."""


class InvalidSearchRequest(PixabayError):
    """Tool arguments violate the request schema."""


class AuthenticationFailed(PixabayError):
    """Pixabay rejected the API key (HTTP 401/403)."""

    def __init__(self):
        super().__init__("Pixabay authentication failed. Verify the API key.")


class RateLimited(PixabayError):
    """Pixabay rate limit exceeded (HTTP 429)."""

    def __init__(self):
        super().__init__(
            "Pixabay rate limit exceeded. Please wait a moment before trying again."
        )


class UpstreamRequestFailed(PixabayError):
    """Any other upstream failure, with or without an HTTP status."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.status_code = status_code
        self.detail = detail
        if status_code is None:
            message = f"Pixabay request failed: {detail}"
        else:
            message = f"Pixabay request failed ({status_code}): {detail}"
        super().__init__(message)


class MissingPresentationAsset(FileNotFoundError):
    """The widget script bundle has not been built."""
