"""
Pixabay MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
from typing import Optional

import httpx
from fastmcp import FastMCP

from pixabay_mcp import __version__
from pixabay_mcp.config import Settings, get_settings
from pixabay_mcp.resources import gallery_widget
from pixabay_mcp.services import PixabayClient, SearchService
from pixabay_mcp.tools import search_images, search_media

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """
    Create and configure the MCP application.

    Settings are read once here and shared by every tool call and resource read.

    Args:
        settings: Loaded settings (default: from env)
        transport: httpx transport for the Pixabay client

    Returns:
        FastMCP server with the tools and the widget resource mounted
    """
    settings = settings or get_settings()
    service = SearchService(settings, client=PixabayClient(settings, transport=transport))

    mcp = FastMCP(
        name="pixabay-image-mcp",
        version=__version__,
        instructions="Royalty-free image and video search on Pixabay",
        # Tool arguments are validated by the search service itself.
        strict_input_validation=False,
    )

    mcp.mount(search_images.create_router(service))
    mcp.mount(search_media.create_router(service))
    mcp.mount(gallery_widget.create_router(settings.widget))

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Pixabay MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    # stdout carries the stdio transport; basicConfig logs to stderr.
    logging.basicConfig(level=settings.log.level)

    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    mcp = create_app(settings)
    logger.info("Starting pixabay-image-mcp %s over %s", __version__, transport)

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
