"""
Pixabay MCP Server

Pixabay image and video search exposed as MCP tools.
"""

__version__ = "0.1.0"
