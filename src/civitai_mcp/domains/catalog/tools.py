"""MCP Tools for Civitai model catalog operations."""

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from civitai_mcp.clients.civitai import CivitaiClient
from civitai_mcp.domains.catalog.models import CatalogModel
from civitai_mcp.models.common import PaginatedList
from civitai_mcp.utils.errors import CivitaiError
from civitai_mcp.utils.response import ResponseBuilder, Verbosity, error_response

if TYPE_CHECKING:
    from civitai_mcp.server import CivitaiServer


def _models_page(page: PaginatedList[CatalogModel], verbosity: str) -> dict[str, Any]:
    level = Verbosity.from_str(verbosity)
    items = [ResponseBuilder.model_list_item(model, level) for model in page.items]
    return ResponseBuilder.page(page, items)


def _invalid_arguments(e: ValueError) -> dict[str, Any]:
    return {"error": "Invalid arguments", "message": str(e)}


def register_tools(mcp: FastMCP, server: "CivitaiServer") -> None:
    """Register model catalog tools with the MCP server."""

    @mcp.tool()
    async def search_models(
        query: str | None = None,
        limit: int | None = None,
        page: int | None = None,
        types: list[str] | None = None,
        sort: str | None = None,
        period: str | None = None,
        nsfw: bool | None = None,
        base_models: list[str] | None = None,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Search for AI models on Civitai with various filters.

        Args:
            query: Search query to filter models by name.
            limit: Number of results per page.
            page: Page number for pagination, starting at 1.
            types: Model types, e.g. ["Checkpoint", "LORA"].
            sort: "Highest Rated", "Most Downloaded" or "Newest".
            period: "AllTime", "Year", "Month", "Week" or "Day".
            nsfw: Whether to include NSFW models.
            base_models: Base models, e.g. ["SD 1.5", "SDXL 1.0"].
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            Matching models with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.list_models(
                    query=query,
                    limit=limit,
                    page=page,
                    types=types,
                    sort=sort,
                    period=period,
                    nsfw=nsfw,
                    base_models=base_models,
                )
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    async def get_model(model_id: int) -> dict[str, Any]:
        """Get detailed information about a specific model.

        Args:
            model_id: The Civitai model ID.

        Returns:
            The model with its creator, tags, stats and every version.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                model = await client.get_model(model_id)
        except CivitaiError as e:
            return error_response(e)

        return ResponseBuilder.model_detail(model)

    @mcp.tool()
    async def get_model_version(model_version_id: int) -> dict[str, Any]:
        """Get detailed information about a specific model version.

        Args:
            model_version_id: The Civitai model version ID.

        Returns:
            Version details including files, trained words and parent model.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                version = await client.get_model_version(model_version_id)
        except CivitaiError as e:
            return error_response(e)

        return ResponseBuilder.version_detail(version)

    @mcp.tool()
    async def get_model_version_by_hash(hash: str) -> dict[str, Any]:
        """Identify a model version from the hash of one of its files.

        Useful for working out which model a local file came from.

        Args:
            hash: File hash (AutoV1, AutoV2, SHA256, CRC32 or Blake3).

        Returns:
            Version details including files, trained words and parent model.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                version = await client.get_model_version_by_hash(hash)
        except CivitaiError as e:
            return error_response(e)

        return ResponseBuilder.version_detail(version)

    @mcp.tool()
    async def get_popular_models(
        period: str = "Week",
        limit: int = 20,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Get the most downloaded models in a time period.

        Args:
            period: "AllTime", "Year", "Month", "Week" or "Day" (default: Week).
            limit: Number of models to return (default: 20).
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            Models ordered by downloads with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.get_popular_models(period=period, limit=limit)
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    async def get_latest_models(
        limit: int = 20,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Get the newest models uploaded to Civitai.

        Args:
            limit: Number of models to return (default: 20).
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            Models ordered newest first with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.get_latest_models(limit=limit)
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    async def get_top_rated_models(
        period: str = "AllTime",
        limit: int = 20,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Get the highest rated models in a time period.

        Args:
            period: "AllTime", "Year", "Month", "Week" or "Day" (default: AllTime).
            limit: Number of models to return (default: 20).
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            Models ordered by rating with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.get_top_rated_models(period=period, limit=limit)
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    async def search_models_by_tag(
        tag: str,
        limit: int | None = None,
        sort: str | None = None,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Find models carrying a specific tag.

        Args:
            tag: Tag name, e.g. "anime".
            limit: Number of models to return (default: 20).
            sort: "Highest Rated", "Most Downloaded" or "Newest".
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            Matching models with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.search_models_by_tag(tag, limit=limit, sort=sort)
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    async def search_models_by_creator(
        username: str,
        limit: int | None = None,
        sort: str | None = None,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Find models published by a specific creator.

        Args:
            username: Creator username.
            limit: Number of models to return (default: 20).
            sort: "Highest Rated", "Most Downloaded" or "Newest".
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            The creator's models with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.search_models_by_creator(username, limit=limit, sort=sort)
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    async def get_models_by_type(
        type: str,
        limit: int | None = None,
        sort: str | None = None,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """Get models of one type.

        Args:
            type: Model type: "Checkpoint", "TextualInversion", "Hypernetwork",
                "AestheticGradient", "LORA", "Controlnet" or "Poses".
            limit: Number of models to return (default: 20).
            sort: "Highest Rated", "Most Downloaded" or "Newest".
            verbosity: Response detail level - "minimal", "standard", or "full".

        Returns:
            Models of the given type with pagination information.
        """
        try:
            async with CivitaiClient.from_config(server.config) as client:
                result = await client.get_models_by_type(type, limit=limit, sort=sort)
        except ValueError as e:
            return _invalid_arguments(e)
        except CivitaiError as e:
            return error_response(e)

        return _models_page(result, verbosity)

    @mcp.tool()
    def get_download_url(model_version_id: int) -> dict[str, Any]:
        """Get the download URL for a model version.

        No request is made to Civitai. When an API key is configured it is
        embedded in the URL, which some models require.

        Args:
            model_version_id: The Civitai model version ID.

        Returns:
            The download URL and a wget command that keeps the server-side
            file name.
        """
        client = CivitaiClient.from_config(server.config)
        url = client.get_download_url(model_version_id)
        return {
            "model_version_id": model_version_id,
            "download_url": url,
            "authenticated": client.is_authenticated,
            "wget_command": f'wget "{url}" --content-disposition',
        }
