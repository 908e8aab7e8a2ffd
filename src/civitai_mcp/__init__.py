"""Civitai MCP server - exposes the Civitai model catalog as MCP tools."""

__version__ = "0.1.0"
