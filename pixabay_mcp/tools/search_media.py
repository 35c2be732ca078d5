"""
MCP Tool - search_pixabay_media

Combined photo and video search on Pixabay.
"""

from fastmcp import FastMCP

from pixabay_mcp.services import SearchService
from pixabay_mcp.tools.base import SearchTool, widget_meta

TOOL_NAME = "search_pixabay_media"
TOOL_DESCRIPTION = (
    "Finds royalty-free images and videos from Pixabay that match the user's search query."
)


def create_router(service: SearchService) -> FastMCP:
    """Router exposing the combined search tool. Orientation only applies to images."""
    router = FastMCP("search_media")
    router.add_tool(
        SearchTool(
            name=TOOL_NAME,
            title="Search Pixabay Images and Videos",
            description=TOOL_DESCRIPTION,
            meta=widget_meta("Media ready."),
            handler=service.search_media,
        )
    )
    return router
