"""MCP Tools for browsing Civitai creators."""

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from civitai_mcp.clients.civitai import CivitaiClient
from civitai_mcp.utils.errors import CivitaiError
from civitai_mcp.utils.response import ResponseBuilder, error_response

if TYPE_CHECKING:
    from civitai_mcp.server import CivitaiServer


def register_tools(mcp: FastMCP, server: "CivitaiServer") -> None:
    """Register creator tools with the MCP server."""

    @mcp.tool()
    async def get_creators(
        query: str | None = None,
        limit: int | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        """Browse and search model creators on Civitai.

        Args:
            query: Filter creators by username.
            limit: Number of creators per page.
            page: Page number for pagination, starting at 1.

        Returns:
            Creators with their model counts and pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.list_creators(query=query, limit=limit, page=page)
        except ValueError as e:
            return {"error": "Invalid arguments", "message": str(e)}
        except CivitaiError as e:
            return error_response(e)

        return ResponseBuilder.page(result, [ResponseBuilder.creator_item(c) for c in result.items])
