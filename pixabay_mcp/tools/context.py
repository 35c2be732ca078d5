"""
Tools - Request Context Helpers

Bridges FastMCP's request context and the service layer.
"""

from typing import Any, Dict, Optional

from fastmcp import Context
from fastmcp.server.dependencies import get_context
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from pixabay_mcp.services import ToolResponse

OUTPUT_TEMPLATE_URI = "ui://widget/pixabay-image-gallery.html"


def request_meta(ctx: Optional[Context]) -> Dict[str, Any]:
    """The ``_meta`` object of the given call context, or an empty dict."""
    if ctx is None:
        return {}

    meta = getattr(ctx.request_context, "meta", None)
    if meta is None:
        return {}
    return meta.model_dump()


def current_request_meta() -> Dict[str, Any]:
    """The ``_meta`` object of the tool call being served, if any."""
    try:
        ctx = get_context()
    except RuntimeError:
        return {}
    return request_meta(ctx)


def to_tool_result(response: ToolResponse) -> ToolResult:
    return ToolResult(
        content=[TextContent(type="text", text=response.summary)],
        structured_content=response.structured_content,
        meta=response.meta,
    )
