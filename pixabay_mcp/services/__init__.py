"""
Services Module - Business Logic Layer

Provides request validation, the Pixabay client, response mapping,
presentation, and the widget loader.
"""

from pixabay_mcp.services.pixabay_client import PixabayClient
from pixabay_mcp.services.search_service import SearchService
from pixabay_mcp.services.presenter import ToolResponse
from pixabay_mcp.services.widget import load_widget_html

__all__ = [
    "PixabayClient",
    "SearchService",
    "ToolResponse",
    "load_widget_html",
]
