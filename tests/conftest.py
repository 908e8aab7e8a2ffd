"""Shared fixtures: canned Civitai payloads and a fake API transport."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from civitai_mcp.clients.civitai import CivitaiClient
from civitai_mcp.config import CivitaiConfig

API_PREFIX = "/api/v1"


class FakeCivitai:
    """In-memory stand-in for the Civitai API.

    Routes map an endpoint path (without the /api/v1 prefix) to a canned
    response or to an exception raised by the transport. Every request is
    recorded.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        json: Any = None,
        status_code: int = 200,
        content: bytes | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        self.routes[path] = respond

    def fail(self, path: str, exc_type: type[httpx.RequestError], message: str) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        self.routes[path] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"error": "No route"})
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def fake_api() -> FakeCivitai:
    """A fake Civitai API with no routes."""
    return FakeCivitai()


@pytest.fixture
def client(fake_api: FakeCivitai) -> CivitaiClient:
    """An anonymous client wired to the fake API."""
    return CivitaiClient(transport=fake_api.transport)


@pytest.fixture
def authed_client(fake_api: FakeCivitai) -> CivitaiClient:
    """A client with an API key wired to the fake API."""
    return CivitaiClient(api_key="abc", transport=fake_api.transport)


@pytest.fixture
def mock_server() -> MagicMock:
    """A CivitaiServer stand-in carrying an anonymous config."""
    server = MagicMock()
    server.config = CivitaiConfig(api_key=None, _env_file=None)
    return server


@pytest.fixture
def creator_payload() -> dict[str, Any]:
    return {
        "username": "artist",
        "image": "https://image.civitai.com/avatar.png",
        "modelCount": 12,
        "link": "https://civitai.com/api/v1/models?username=artist",
    }


@pytest.fixture
def file_payload() -> dict[str, Any]:
    return {
        "sizeKb": 2082642.5,
        "pickleScanResult": "Success",
        "virusScanResult": "Success",
        "scannedAt": "2024-01-02T00:00:00.000Z",
        "primary": True,
        "metadata": {"fp": "fp16", "size": "pruned", "format": "SafeTensor"},
    }


@pytest.fixture
def image_payload() -> dict[str, Any]:
    return {
        "id": 501,
        "url": "https://image.civitai.com/501.jpeg",
        "hash": "U5F~",
        "width": 512,
        "height": 768,
        "nsfw": False,
        "nsfwLevel": "None",
        "createdAt": "2024-01-03T00:00:00.000Z",
        "postId": 77,
        "stats": {"heartCount": 4, "likeCount": 9, "commentCount": 1},
        "meta": {"prompt": "a lighthouse at dusk", "steps": 30, "cfgScale": 7},
        "username": "artist",
    }


@pytest.fixture
def model_payload(
    creator_payload: dict[str, Any], file_payload: dict[str, Any], image_payload: dict[str, Any]
) -> dict[str, Any]:
    return {
        "id": 4201,
        "name": "Dreamy Landscapes",
        "description": "<p>" + "Soft painterly landscapes. " * 20 + "</p>",
        "type": "Checkpoint",
        "poi": False,
        "nsfw": False,
        "allowNoCredit": True,
        "tags": ["landscape", "painterly", "scenery", "fantasy", "sky", "clouds"],
        "mode": None,
        "creator": {"username": creator_payload["username"], "image": None},
        "stats": {
            "downloadCount": 1500,
            "favoriteCount": 300,
            "commentCount": 25,
            "ratingCount": 40,
            "rating": 4.8,
        },
        "modelVersions": [
            {
                "id": 9001,
                "name": "v2.0",
                "description": None,
                "createdAt": "2024-02-01T00:00:00.000Z",
                "downloadUrl": "https://civitai.com/api/download/models/9001",
                "trainedWords": ["dreamy"],
                "baseModel": "SDXL 1.0",
                "files": [file_payload],
                "images": [image_payload],
            },
            {
                "id": 9000,
                "name": "v1.0",
                "createdAt": "2024-01-01T00:00:00.000Z",
                "downloadUrl": "https://civitai.com/api/download/models/9000",
                "trainedWords": [],
                "files": [],
                "images": [],
            },
        ],
    }


@pytest.fixture
def version_detail_payload(
    file_payload: dict[str, Any], image_payload: dict[str, Any]
) -> dict[str, Any]:
    return {
        "id": 9001,
        "modelId": 4201,
        "name": "v2.0",
        "createdAt": "2024-02-01T00:00:00.000Z",
        "updatedAt": "2024-02-02T00:00:00.000Z",
        "trainedWords": ["dreamy"],
        "baseModel": "SDXL 1.0",
        "description": None,
        "downloadUrl": "https://civitai.com/api/download/models/9001",
        "stats": {"downloadCount": 800, "ratingCount": 10, "rating": 5},
        "model": {"name": "Dreamy Landscapes", "type": "Checkpoint", "nsfw": False, "poi": False},
        "files": [file_payload],
        "images": [image_payload],
    }


@pytest.fixture
def make_page() -> Callable[..., dict[str, Any]]:
    """Build a list response body."""

    def _make(items: list[Any], **metadata: Any) -> dict[str, Any]:
        return {"items": items, "metadata": metadata}

    return _make
