"""FastMCP server definition for Civitai with pluggy-based domain plugins."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from http import HTTPStatus
from typing import Any

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from civitai_mcp.config import CivitaiConfig, get_config
from civitai_mcp.plugin_manager import PluginManager

logger = logging.getLogger(__name__)


class CivitaiServer:
    """Civitai MCP Server with core domain plugins and external plugin discovery."""

    def __init__(self, config: CivitaiConfig | None = None) -> None:
        self._config = config or get_config()
        self._mcp: FastMCP | None = None
        self._plugin_manager: PluginManager | None = None

    @property
    def config(self) -> CivitaiConfig:
        """Get server configuration."""
        return self._config

    @property
    def mcp(self) -> FastMCP:
        """Get the MCP server instance.

        Raises:
            RuntimeError: If server is not initialized.
        """
        if self._mcp is None:
            raise RuntimeError("Server not initialized.")
        return self._mcp

    @property
    def plugin_manager(self) -> PluginManager:
        """Get the plugin manager.

        Raises:
            RuntimeError: If server is not initialized.
        """
        if self._plugin_manager is None:
            raise RuntimeError("Server not initialized.")
        return self._plugin_manager

    def startup(self) -> None:
        """Run plugin health checks and report what is active."""
        if not self._config.is_authenticated:
            logger.info("No Civitai API key configured; requests will be anonymous")

        if self._plugin_manager is None:
            return

        self._plugin_manager.run_health_checks(self)
        logger.info(
            f"Civitai MCP server started with "
            f"{len(self._plugin_manager.healthy_plugins)}/"
            f"{len(self._plugin_manager.registered_plugins)} plugins active"
        )

    def _create_lifespan(self) -> Callable[[Any], AbstractAsyncContextManager[None]]:
        """Create the lifespan context manager for the MCP server."""
        server_self = self

        @asynccontextmanager
        async def lifespan(_app: Any) -> AsyncIterator[None]:
            logger.info("Starting Civitai MCP server...")
            server_self.startup()
            try:
                yield
            finally:
                logger.info("Civitai MCP server shut down")

        return lifespan

    def create_mcp(self) -> FastMCP:
        """Create and configure the FastMCP server."""
        self._plugin_manager = PluginManager()
        self._plugin_manager.load_core_plugins()
        self._plugin_manager.load_entrypoint_plugins()

        mcp = FastMCP(
            name="civitai-mcp",
            instructions="MCP server for Civitai - search and inspect AI models, "
            "model versions, images, creators and tags, and build model "
            "download links.",
            lifespan=self._create_lifespan(),
            host=self._config.host,
            port=self._config.port,
        )
        self._mcp = mcp

        self._plugin_manager.register_all_tools(mcp, self)
        self._register_health_endpoint(mcp)

        return mcp

    def _register_health_endpoint(self, mcp: FastMCP) -> None:
        """Expose /health for the HTTP transports."""

        @mcp.custom_route("/health", methods=["GET"])
        async def health(_request: Request) -> JSONResponse:
            pm = self._plugin_manager
            total = len(pm.registered_plugins) if pm else 0
            healthy = len(pm.healthy_plugins) if pm else 0
            is_healthy = healthy > 0

            return JSONResponse(
                {
                    "status": "healthy" if is_healthy else "unhealthy",
                    "authenticated": self._config.is_authenticated,
                    "plugins": {"total": total, "healthy": healthy},
                },
                status_code=HTTPStatus.OK if is_healthy else HTTPStatus.SERVICE_UNAVAILABLE,
            )


# Global server instance
_server: CivitaiServer | None = None


def get_server() -> CivitaiServer:
    """Get the global server instance."""
    global _server
    if _server is None:
        _server = CivitaiServer()
    return _server


def create_server(config: CivitaiConfig | None = None) -> FastMCP:
    """Create and return the MCP server instance.

    This is the main entry point for creating the server.
    """
    global _server
    _server = CivitaiServer(config)
    return _server.create_mcp()
