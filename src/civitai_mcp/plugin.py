"""Plugin interface for Civitai MCP components.

This module defines the plugin base class and metadata that domain
plugins use to integrate with the server via pluggy hooks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from civitai_mcp.hooks import hookimpl

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from civitai_mcp.server import CivitaiServer

RegisterTools = Callable[["FastMCP", "CivitaiServer"], None]


@dataclass
class PluginMetadata:
    """Metadata describing a Civitai MCP plugin."""

    name: str
    """Unique plugin name, e.g., 'catalog', 'images'."""

    version: str
    """Plugin version following semver, e.g., '1.0.0'."""

    description: str
    """Human-readable description of what this plugin provides."""


class BasePlugin:
    """Base implementation of a Civitai MCP plugin.

    Subclasses override the hook methods they need; overriding methods must
    keep the ``@hookimpl`` decorator.

    Example entry point in pyproject.toml for external plugins:
        [project.entry-points."civitai_mcp.plugins"]
        my_plugin = "my_package.plugin:MyPlugin"
    """

    def __init__(self, metadata: PluginMetadata) -> None:
        self._metadata = metadata

    @property
    def metadata(self) -> PluginMetadata:
        """Plugin metadata."""
        return self._metadata

    @hookimpl
    def civitai_get_plugin_metadata(self) -> PluginMetadata:
        """Return plugin metadata."""
        return self._metadata

    @hookimpl
    def civitai_register_tools(self, mcp: FastMCP, server: CivitaiServer) -> None:
        """Register MCP tools. Override in subclass."""
        pass

    @hookimpl
    def civitai_health_check(self, server: CivitaiServer) -> tuple[bool, str]:
        """Report readiness. Override when the plugin has requirements to check."""
        return True, "Ready"


class DomainPlugin(BasePlugin):
    """Plugin wrapping a domain module's ``register_tools`` function."""

    def __init__(self, metadata: PluginMetadata, register_tools: RegisterTools) -> None:
        super().__init__(metadata)
        self._register_tools = register_tools

    @hookimpl
    def civitai_register_tools(self, mcp: FastMCP, server: CivitaiServer) -> None:
        """Register the domain's tools."""
        self._register_tools(mcp, server)
