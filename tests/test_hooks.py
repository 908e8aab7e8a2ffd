"""Unit tests for hook specifications and the plugin base class."""

from unittest.mock import MagicMock

import pluggy
import pytest

from civitai_mcp.config import CivitaiConfig
from civitai_mcp.hooks import PROJECT_NAME, CivitaiMCPHookSpec, hookimpl
from civitai_mcp.plugin import BasePlugin, DomainPlugin, PluginMetadata


def _metadata(name: str = "test") -> PluginMetadata:
    return PluginMetadata(name=name, version="1.0.0", description="Test plugin")


class TestHookSpec:
    """Tests for CivitaiMCPHookSpec."""

    def test_project_name_defined(self) -> None:
        """Verify project name is defined correctly."""
        assert PROJECT_NAME == "civitai_mcp"

    def test_hookspec_can_be_added_to_pluggy(self) -> None:
        """Verify hookspec can be registered with pluggy."""
        pm = pluggy.PluginManager(PROJECT_NAME)
        pm.add_hookspecs(CivitaiMCPHookSpec)

        assert hasattr(pm.hook, "civitai_get_plugin_metadata")
        assert hasattr(pm.hook, "civitai_register_tools")
        assert hasattr(pm.hook, "civitai_health_check")


class TestHookImpl:
    """Tests for hook implementations."""

    def test_plugin_with_hookimpl_can_register(self) -> None:
        """Verify a plain class with hookimpl decorators can be registered."""

        class TestPlugin:
            @hookimpl
            def civitai_get_plugin_metadata(self) -> PluginMetadata:
                return _metadata()

        pm = pluggy.PluginManager(PROJECT_NAME)
        pm.add_hookspecs(CivitaiMCPHookSpec)
        pm.register(TestPlugin())

        results = pm.hook.civitai_get_plugin_metadata()
        assert len(results) == 1
        assert results[0].name == "test"

    def test_domain_plugin_registers_tools(self) -> None:
        """DomainPlugin forwards tool registration to its function."""
        register = MagicMock()
        plugin = DomainPlugin(_metadata("catalog"), register)

        pm = pluggy.PluginManager(PROJECT_NAME)
        pm.add_hookspecs(CivitaiMCPHookSpec)
        pm.register(plugin)

        mcp, server = MagicMock(), MagicMock()
        pm.hook.civitai_register_tools(mcp=mcp, server=server)

        register.assert_called_once_with(mcp, server)


class TestBasePluginHealth:
    """Tests for the default health check."""

    @pytest.mark.parametrize("api_key", [None, "abc"])
    def test_ready_with_or_without_key(self, api_key: str | None) -> None:
        """Anonymous access is enough for every core tool."""
        server = MagicMock()
        server.config = CivitaiConfig(api_key=api_key, _env_file=None)

        assert BasePlugin(_metadata()).civitai_health_check(server) == (True, "Ready")
