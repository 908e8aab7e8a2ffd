"""Tests for image tools."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from civitai_mcp.domains.images.tools import register_tools


@pytest.fixture
def browse_images(capture_tools: Any, mock_server: MagicMock) -> Any:
    return capture_tools(register_tools, mock_server)["browse_images"]


class TestBrowseImages:
    """Test browse_images tool."""

    async def test_success(
        self,
        browse_images: Any,
        fake_api: Any,
        patched_client: Any,
        image_payload: dict,
        make_page: Any,
    ) -> None:
        fake_api.add("/images", json=make_page([image_payload], nextCursor="501|99"))

        result = await browse_images(model_id=4201, sort="Most Reactions", nsfw="Soft")

        assert result["items"][0]["id"] == 501
        assert result["items"][0]["has_generation_info"] is True
        assert result["pagination"]["next_cursor"] == "501|99"
        params = fake_api.last_request.url.params
        assert params["modelId"] == "4201"
        assert params["sort"] == "Most Reactions"
        assert params["nsfw"] == "Soft"

    async def test_full_verbosity_includes_meta(
        self,
        browse_images: Any,
        fake_api: Any,
        patched_client: Any,
        image_payload: dict,
        make_page: Any,
    ) -> None:
        fake_api.add("/images", json=make_page([image_payload]))

        result = await browse_images(verbosity="full")

        assert result["items"][0]["meta"]["steps"] == 30

    async def test_numeric_nsfw_level_passes_through(
        self,
        browse_images: Any,
        fake_api: Any,
        patched_client: Any,
        image_payload: dict,
        make_page: Any,
    ) -> None:
        image_payload["nsfwLevel"] = 1
        fake_api.add("/images", json=make_page([image_payload]))

        result = await browse_images()

        assert result["items"][0]["nsfw_level"] == 1

    async def test_invalid_page(
        self, browse_images: Any, fake_api: Any, patched_client: Any
    ) -> None:
        result = await browse_images(page=0)

        assert result["error"] == "Invalid arguments"
        assert fake_api.requests == []

    async def test_timeout(self, browse_images: Any, fake_api: Any, patched_client: Any) -> None:
        import httpx

        fake_api.fail("/images", httpx.ReadTimeout, "timed out")

        result = await browse_images()

        assert result["error"] == "Request failed"
