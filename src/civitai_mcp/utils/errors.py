"""Exception hierarchy for Civitai MCP.

Every failure raised by the Civitai client derives from ``CivitaiError``
and carries a human-readable message. The subclasses only separate the
coarse failure kinds: the request never completed, the API answered with
a non-success status, or the body did not have the expected shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civitai_mcp.models.validation import FieldError


class CivitaiError(Exception):
    """Base exception for Civitai MCP errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(CivitaiError):
    """Raised when the server configuration is invalid."""


class RequestFailedError(CivitaiError):
    """The HTTP request could not be completed (DNS, connect, TLS, timeout)."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"API request failed: {cause}")


class APIStatusError(CivitaiError):
    """The Civitai API answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, path: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.path = path
        super().__init__(f"HTTP {status_code}: {reason}")


class NotFoundError(APIStatusError):
    """The requested model, model version or hash does not exist."""

    def __init__(self, reason: str = "Not Found", path: str | None = None) -> None:
        super().__init__(404, reason, path)


class ResponseValidationError(CivitaiError):
    """The response body did not match the expected schema."""

    def __init__(self, endpoint: str, errors: Sequence[FieldError]) -> None:
        self.endpoint = endpoint
        self.errors = list(errors)
        details = "; ".join(str(error) for error in self.errors[:5])
        if len(self.errors) > 5:
            details += f" (+{len(self.errors) - 5} more)"
        super().__init__(f"Invalid response from {endpoint}: {details}")
