"""MCP Tools for browsing Civitai tags."""

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from civitai_mcp.clients.civitai import CivitaiClient
from civitai_mcp.utils.errors import CivitaiError
from civitai_mcp.utils.response import ResponseBuilder, error_response

if TYPE_CHECKING:
    from civitai_mcp.server import CivitaiServer


def register_tools(mcp: FastMCP, server: "CivitaiServer") -> None:
    """Register tag tools with the MCP server."""

    @mcp.tool()
    async def get_tags(
        query: str | None = None,
        limit: int | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        """Browse and search model tags on Civitai.

        Tag names can be passed to search_models_by_tag.

        Args:
            query: Filter tags by name.
            limit: Number of tags per page.
            page: Page number for pagination, starting at 1.

        Returns:
            Tags with their model counts and pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.list_tags(query=query, limit=limit, page=page)
        except ValueError as e:
            return {"error": "Invalid arguments", "message": str(e)}
        except CivitaiError as e:
            return error_response(e)

        return ResponseBuilder.page(result, [ResponseBuilder.tag_item(t) for t in result.items])
