"""Loads Civitai MCP domain plugins and drives their pluggy hooks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pluggy

from civitai_mcp.hooks import PROJECT_NAME, CivitaiMCPHookSpec

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from civitai_mcp.server import CivitaiServer

logger = logging.getLogger(__name__)

# Entry point group name for external plugin discovery
PLUGIN_ENTRY_POINT_GROUP = "civitai_mcp.plugins"

HealthResult = tuple[bool, str]


class PluginManager:
    """Tracks the core and external plugins serving tools for one server.

    pluggy's registry is the source of truth for which plugins exist; this
    class only adds the health state the /health route reports.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CivitaiMCPHookSpec)
        self._healthy_plugins: dict[str, Any] = {}

    @property
    def registered_plugins(self) -> dict[str, Any]:
        """Registered plugins by name, core and external alike."""
        return {
            name: plugin
            for name, plugin in self._pm.list_name_plugin()
            if plugin is not None
        }

    @property
    def healthy_plugins(self) -> dict[str, Any]:
        """Plugins that passed the last health check run."""
        return self._healthy_plugins

    def load_core_plugins(self) -> int:
        """Register the catalog, images, creators and tags plugins."""
        from civitai_mcp.domains.registry import get_core_plugins

        plugins = get_core_plugins()
        for plugin in plugins:
            self._pm.register(plugin, name=plugin.metadata.name)
            logger.debug(f"Registered core plugin: {plugin.metadata.name}")

        logger.info(f"Loaded {len(plugins)} core domain plugins")
        return len(plugins)

    def load_entrypoint_plugins(self) -> int:
        """Register third-party plugins advertised under the entry point group."""
        count = self._pm.load_setuptools_entrypoints(PLUGIN_ENTRY_POINT_GROUP)
        if count:
            logger.info(f"Loaded {count} external plugins from {PLUGIN_ENTRY_POINT_GROUP}")
        return count

    def register_all_tools(self, mcp: FastMCP, server: CivitaiServer) -> None:
        self._pm.hook.civitai_register_tools(mcp=mcp, server=server)
        for meta in self._pm.hook.civitai_get_plugin_metadata():
            logger.info(f"Plugin {meta.name} v{meta.version}: {meta.description}")

    def run_health_checks(self, server: CivitaiServer) -> dict[str, HealthResult]:
        """Check every plugin and remember which ones can serve requests.

        A plugin without a health hook counts as healthy; one whose hook
        raises counts as unhealthy.
        """
        results = {
            name: self._check(name, plugin, server)
            for name, plugin in self.registered_plugins.items()
        }
        self._healthy_plugins = {
            name: plugin
            for name, plugin in self.registered_plugins.items()
            if results[name][0]
        }
        return results

    @staticmethod
    def _check(name: str, plugin: Any, server: CivitaiServer) -> HealthResult:
        check = getattr(plugin, "civitai_health_check", None)
        if check is None:
            return True, "No health check defined"

        try:
            healthy, message = check(server=server)
        except Exception as e:
            logger.warning(f"Plugin {name} health check failed with error: {e}")
            return False, f"Health check error: {e}"

        if healthy:
            logger.info(f"Plugin {name} health check passed: {message}")
        else:
            logger.warning(f"Plugin {name} unavailable: {message}")
        return healthy, message
