"""MCP Tools for browsing Civitai images."""

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from civitai_mcp.clients.civitai import CivitaiClient
from civitai_mcp.utils.errors import CivitaiError
from civitai_mcp.utils.response import ResponseBuilder, Verbosity, error_response

if TYPE_CHECKING:
    from civitai_mcp.server import CivitaiServer


def register_tools(mcp: FastMCP, server: "CivitaiServer") -> None:
    """Register image tools with the MCP server."""

    @mcp.tool()
    async def browse_images(
        limit: int | None = None,
        page: int | None = None,
        model_id: int | None = None,
        model_version_id: int | None = None,
        post_id: int | None = None,
        username: str | None = None,
        nsfw: str | None = None,
        sort: str | None = None,
        period: str | None = None,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Browse AI-generated images posted to Civitai.

        Args:
            limit: Number of images per page.
            page: Page number for pagination, starting at 1.
            model_id: Only images made with this model.
            model_version_id: Only images made with this model version.
            post_id: Only images from this post.
            username: Only images posted by this user.
            nsfw: NSFW filter - "None", "Soft", "Mature" or "X".
            sort: "Most Reactions", "Most Comments" or "Newest".
            period: "AllTime", "Year", "Month", "Week" or "Day".
            verbosity: Response detail level - "minimal", "standard", or "full".
                Use "full" to include generation parameters.

        Returns:
            Images with pagination information.
        """
        level = Verbosity.from_str(verbosity)
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.list_images(
                    limit=limit,
                    page=page,
                    model_id=model_id,
                    model_version_id=model_version_id,
                    post_id=post_id,
                    username=username,
                    nsfw=nsfw,
                    sort=sort,
                    period=period,
                )
        except ValueError as e:
            return {"error": "Invalid arguments", "message": str(e)}
        except CivitaiError as e:
            return error_response(e)

        items = [ResponseBuilder.image_item(image, level) for image in result.items]
        return ResponseBuilder.page(result, items)
