"""Pytest fixtures for domain tool tests."""

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from civitai_mcp.clients.civitai import CivitaiClient


@pytest.fixture
def capture_tools() -> Callable[[Callable[[Any, Any], None], Any], dict[str, Callable[..., Any]]]:
    """Run a register_tools function and collect the registered tools by name."""

    def _capture(register_tools: Callable[[Any, Any], None], server: Any) -> dict[str, Any]:
        tools: dict[str, Callable[..., Any]] = {}

        def capture_tool() -> Callable[[Callable[..., Any]], Callable[..., Any]]:
            def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
                tools[f.__name__] = f
                return f

            return decorator

        mcp = MagicMock()
        mcp.tool = capture_tool
        register_tools(mcp, server)
        return tools

    return _capture


@pytest.fixture
def patched_client(fake_api: Any) -> Iterator[CivitaiClient]:
    """Route every client the tools create to the fake API."""
    client = CivitaiClient(transport=fake_api.transport)
    with patch.object(CivitaiClient, "from_config", return_value=client):
        yield client
