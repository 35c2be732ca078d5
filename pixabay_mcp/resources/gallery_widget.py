"""
MCP Resource - pixabay-image-gallery

HTML widget the host uses to render search tool output.
"""

from fastmcp import FastMCP

from pixabay_mcp.config import WidgetSettings
from pixabay_mcp.services import load_widget_html
from pixabay_mcp.tools.context import OUTPUT_TEMPLATE_URI

WIDGET_MIME_TYPE = "text/html+skybridge"
WIDGET_DESCRIPTION = (
    "Displays a responsive grid of Pixabay images with captions, attribution, and links."
)


def create_router(widget: WidgetSettings) -> FastMCP:
    """Router exposing the gallery widget built from ``widget.dist_dir``."""
    router = FastMCP("gallery_widget")
    dist_dir = widget.dist_dir

    @router.resource(
        OUTPUT_TEMPLATE_URI,
        name="pixabay-image-gallery",
        mime_type=WIDGET_MIME_TYPE,
        meta={
            "openai/widgetDescription": WIDGET_DESCRIPTION,
            "openai/widgetPrefersBorder": True,
        },
    )
    def pixabay_image_gallery() -> str:
        """Gallery widget document with the script bundle inlined."""
        return load_widget_html(dist_dir)

    return router
