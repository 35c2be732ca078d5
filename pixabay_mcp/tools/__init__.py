"""
Tools Module - MCP Tool Implementations

Pixabay search tools.
"""

from pixabay_mcp.tools import search_images
from pixabay_mcp.tools import search_media

__all__ = [
    "search_images",
    "search_media",
]
