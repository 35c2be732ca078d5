"""
Resources Module - MCP Resources

Widget resources served alongside the tools.
"""

from pixabay_mcp.resources import gallery_widget

__all__ = ["gallery_widget"]
