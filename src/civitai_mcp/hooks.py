"""Pluggy hook specifications for Civitai MCP plugins.

Each domain (catalog, images, creators, tags) is a plugin implementing
these hooks; external packages can contribute further tools through the
``civitai_mcp.plugins`` entry point group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from civitai_mcp.plugin import PluginMetadata
    from civitai_mcp.server import CivitaiServer

PROJECT_NAME = "civitai_mcp"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class CivitaiMCPHookSpec:
    """Hook specifications implemented by Civitai MCP plugins."""

    @hookspec
    def civitai_get_plugin_metadata(self) -> PluginMetadata:  # type: ignore[empty-body]
        """Return metadata describing the plugin."""

    @hookspec
    def civitai_register_tools(self, mcp: FastMCP, server: CivitaiServer) -> None:
        """Register MCP tools with the server."""

    @hookspec
    def civitai_health_check(self, server: CivitaiServer) -> tuple[bool, str]:  # type: ignore[empty-body]
        """Report whether the plugin can serve requests, with a reason."""
