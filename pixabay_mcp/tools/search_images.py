"""
MCP Tool - search_pixabay_images

Royalty-free photo search on Pixabay.
"""

from fastmcp import FastMCP

from pixabay_mcp.services import SearchService
from pixabay_mcp.tools.base import SearchTool, widget_meta

TOOL_NAME = "search_pixabay_images"
TOOL_DESCRIPTION = "Finds royalty-free images from Pixabay that match the user's search query."


def create_router(service: SearchService) -> FastMCP:
    """
    Router exposing the image search tool.

    Args:
        service: SearchService shared by every call

    Returns:
        FastMCP router to mount on the server
    """
    router = FastMCP("search_images")
    router.add_tool(
        SearchTool(
            name=TOOL_NAME,
            title="Search Pixabay Images",
            description=TOOL_DESCRIPTION,
            meta=widget_meta("Images ready."),
            handler=service.search_images,
        )
    )
    return router
