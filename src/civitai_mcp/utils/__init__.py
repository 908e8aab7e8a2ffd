"""Utility functions and helpers for Civitai MCP server."""

from civitai_mcp.utils.errors import (
    APIStatusError,
    CivitaiError,
    ConfigurationError,
    NotFoundError,
    RequestFailedError,
    ResponseValidationError,
)
from civitai_mcp.utils.response import (
    ResponseBuilder,
    Verbosity,
    error_response,
)

__all__ = [
    # Errors
    "CivitaiError",
    "ConfigurationError",
    "RequestFailedError",
    "APIStatusError",
    "NotFoundError",
    "ResponseValidationError",
    # Response formatting
    "Verbosity",
    "ResponseBuilder",
    "error_response",
]
