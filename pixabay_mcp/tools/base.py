"""
Tools - Search Tool Base

FastMCP tool that hands the untouched call arguments to the search service,
so payload validation and its error messages stay in one place.
"""

from typing import Any, Awaitable, Callable, Dict, Mapping

from fastmcp.tools.tool import Tool, ToolResult
from pydantic import Field

from pixabay_mcp.schemas.search import SearchImagesInput
from pixabay_mcp.services import ToolResponse
from pixabay_mcp.tools.context import OUTPUT_TEMPLATE_URI, current_request_meta, to_tool_result

SearchHandler = Callable[[Any, Mapping[str, Any]], Awaitable[ToolResponse]]


def widget_meta(invoked: str) -> Dict[str, Any]:
    """Tool metadata linking results to the gallery widget."""
    return {
        "openai/outputTemplate": OUTPUT_TEMPLATE_URI,
        "openai/toolInvocation/invoking": "Searching Pixabay…",
        "openai/toolInvocation/invoked": invoked,
    }


class SearchTool(Tool):
    """Tool whose arguments are validated by ``handler``, not by FastMCP."""

    handler: SearchHandler = Field(exclude=True)
    parameters: Dict[str, Any] = Field(
        default_factory=SearchImagesInput.model_json_schema
    )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        response = await self.handler(arguments, current_request_meta())
        return to_tool_result(response)
