"""Async HTTP client for the Civitai REST API.

Each operation builds one URL, issues one GET and validates the decoded
body against the matching schema. There are no retries and no caching;
every failure surfaces as a ``CivitaiError`` subclass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx

from civitai_mcp.config import DEFAULT_BASE_URL
from civitai_mcp.domains.catalog.models import (
    CatalogModel,
    ModelsParams,
    ModelVersionDetail,
    validate_model,
    validate_model_version_detail,
    validate_models_page,
)
from civitai_mcp.domains.creators.models import (
    Creator,
    CreatorsParams,
    validate_creators_page,
)
from civitai_mcp.domains.images.models import Image, ImagesParams, validate_images_page
from civitai_mcp.domains.tags.models import Tag, TagsParams, validate_tags_page
from civitai_mcp.models.common import ModelSort, ModelType, PaginatedList, TimePeriod
from civitai_mcp.models.validation import FieldError, Invalid, ValidationResult
from civitai_mcp.utils.errors import (
    APIStatusError,
    NotFoundError,
    RequestFailedError,
    ResponseValidationError,
)

if TYPE_CHECKING:
    from civitai_mcp.config import CivitaiConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", ModelsParams, ImagesParams, CreatorsParams, TagsParams)

# Applied by the convenience listings unless the caller overrides them.
DEFAULT_LIMIT = 20
DEFAULT_NSFW = False


def _query_value(value: Any) -> str:
    """Render a scalar the way the API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _path_segment(value: int | str) -> str:
    return quote(str(value), safe="")


def _coerce_params(
    params_type: type[P], params: P | Mapping[str, Any] | None, filters: dict[str, Any]
) -> P:
    """Merge a parameter bag and keyword filters into one validated bag."""
    if params is None:
        return params_type(**filters)
    if isinstance(params, params_type):
        if not filters:
            return params
        params = params.model_dump(exclude_unset=True)
    return params_type(**{**dict(params), **filters})


class CivitaiClient:
    """Client for the Civitai REST API.

    Configuration is fixed at construction time. Use as an async context
    manager to share one connection pool across several calls; outside a
    context each call opens and closes its own connection.

    Example:
        async with CivitaiClient(api_key="...") as client:
            page = await client.list_models(query="anime", limit=5)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Civitai API token. When set it is sent both as the
                ``token`` query parameter and as a bearer Authorization header.
            base_url: Base URL of the REST API.
            timeout: Per-request timeout in seconds, None to disable.
            transport: Optional httpx transport, mainly for tests.
        """
        self._api_key = api_key or None
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: CivitaiConfig) -> CivitaiClient:
        """Create a client from server configuration."""
        return cls(api_key=config.api_key, base_url=config.base_url, timeout=config.timeout)

    @property
    def base_url(self) -> str:
        """Base URL of the REST API."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Whether requests carry an API token."""
        return self._api_key is not None

    async def __aenter__(self) -> CivitaiClient:
        self._http = self._create_http_client()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    def _create_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def build_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        """Build a request URL.

        The token comes first when configured. Parameters that are None or
        an empty string are dropped; list values become one query parameter
        per element, in order.

        Args:
            path: Endpoint path with identifiers already escaped.
            params: Query parameters keyed by upstream name.

        Returns:
            Absolute URL string.
        """
        query: list[tuple[str, str]] = []
        if self._api_key:
            query.append(("token", self._api_key))

        for key, value in (params or {}).items():
            if value is None or (isinstance(value, str) and value == ""):
                continue
            if isinstance(value, (list, tuple)):
                query.extend((key, _query_value(item)) for item in value)
            else:
                query.append((key, _query_value(value)))

        return str(httpx.URL(f"{self._base_url}{path}", params=query))

    async def _get(
        self,
        path: str,
        validator: Callable[[Any], ValidationResult[T]],
        params: Mapping[str, Any] | None = None,
    ) -> T:
        url = self.build_url(path, params)
        logger.debug(f"GET {path} params={sorted((params or {}).keys())}")

        if self._http is not None:
            return await self._send(self._http, url, path, validator)
        async with self._create_http_client() as http:
            return await self._send(http, url, path, validator)

    async def _send(
        self,
        http: httpx.AsyncClient,
        url: str,
        path: str,
        validator: Callable[[Any], ValidationResult[T]],
    ) -> T:
        try:
            response = await http.get(url, headers=self._headers())
        except httpx.RequestError as e:
            logger.warning(f"Request to {path} failed: {type(e).__name__}: {e}")
            raise RequestFailedError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"Civitai API returned {response.status_code} for {path}")
            if response.status_code == 404:
                raise NotFoundError(response.reason_phrase or "Not Found", path)
            raise APIStatusError(response.status_code, response.reason_phrase, path)

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseValidationError(
                path, [FieldError(location="", message=f"Response is not valid JSON: {e}")]
            ) from e

        result = validator(data)
        if isinstance(result, Invalid):
            logger.warning(f"Response from {path} failed validation: {result.describe()}")
            raise ResponseValidationError(path, result.errors)
        return result.value

    # Models

    async def list_models(
        self, params: ModelsParams | Mapping[str, Any] | None = None, **filters: Any
    ) -> PaginatedList[CatalogModel]:
        """List models matching the given filters.

        Args:
            params: Filter bag; keyword filters are merged over it.
            **filters: Individual ModelsParams fields.

        Returns:
            A page of models with pagination metadata.

        Raises:
            ValueError: If the filters are invalid (e.g. a non-positive limit).
            CivitaiError: If the request, status or response validation fails.
        """
        bag = _coerce_params(ModelsParams, params, filters)
        return await self._get("/models", validate_models_page, bag.to_query())

    async def get_model(self, model_id: int) -> CatalogModel:
        """Get a model by id.

        Raises:
            NotFoundError: If no model has this id.
        """
        return await self._get(f"/models/{_path_segment(model_id)}", validate_model)

    async def get_model_version(self, version_id: int) -> ModelVersionDetail:
        """Get a model version by id, with a summary of its parent model.

        Raises:
            NotFoundError: If no version has this id.
        """
        return await self._get(
            f"/model-versions/{_path_segment(version_id)}", validate_model_version_detail
        )

    async def get_model_version_by_hash(self, file_hash: str) -> ModelVersionDetail:
        """Get the model version owning a file with the given hash.

        Civitai accepts AutoV1, AutoV2, SHA256, CRC32 and Blake3 hashes.

        Raises:
            NotFoundError: If no file has this hash.
        """
        return await self._get(
            f"/model-versions/by-hash/{_path_segment(file_hash)}", validate_model_version_detail
        )

    def get_download_url(self, version_id: int) -> str:
        """Build the download URL for a model version.

        No request is made. The API token is embedded when configured.
        """
        return self.build_url(f"/download/models/{_path_segment(version_id)}")

    # Images, creators and tags

    async def list_images(
        self, params: ImagesParams | Mapping[str, Any] | None = None, **filters: Any
    ) -> PaginatedList[Image]:
        """List images matching the given filters."""
        bag = _coerce_params(ImagesParams, params, filters)
        return await self._get("/images", validate_images_page, bag.to_query())

    async def list_creators(
        self, params: CreatorsParams | Mapping[str, Any] | None = None, **filters: Any
    ) -> PaginatedList[Creator]:
        """List creators, optionally filtered by username query."""
        bag = _coerce_params(CreatorsParams, params, filters)
        return await self._get("/creators", validate_creators_page, bag.to_query())

    async def list_tags(
        self, params: TagsParams | Mapping[str, Any] | None = None, **filters: Any
    ) -> PaginatedList[Tag]:
        """List tags, optionally filtered by name query."""
        bag = _coerce_params(TagsParams, params, filters)
        return await self._get("/tags", validate_tags_page, bag.to_query())

    # Convenience listings

    async def search_models(self, query: str, **options: Any) -> PaginatedList[CatalogModel]:
        """Search models by name."""
        return await self.list_models(**{**options, "query": query})

    async def search_models_by_tag(self, tag: str, **options: Any) -> PaginatedList[CatalogModel]:
        """List models carrying a tag."""
        return await self.list_models(**self._with_defaults(options, tag=tag))

    async def search_models_by_creator(
        self, username: str, **options: Any
    ) -> PaginatedList[CatalogModel]:
        """List models published by a creator."""
        return await self.list_models(**self._with_defaults(options, username=username))

    async def get_models_by_type(
        self, model_type: ModelType | str, **options: Any
    ) -> PaginatedList[CatalogModel]:
        """List models of one type."""
        return await self.list_models(**self._with_defaults(options, types=[model_type]))

    async def get_popular_models(
        self,
        period: TimePeriod | str | None = TimePeriod.WEEK,
        limit: int | None = DEFAULT_LIMIT,
        **options: Any,
    ) -> PaginatedList[CatalogModel]:
        """List the most downloaded models in a period (default: past week)."""
        return await self.list_models(
            **self._with_defaults(
                options,
                sort=ModelSort.MOST_DOWNLOADED,
                period=TimePeriod.WEEK if period is None else period,
                limit=DEFAULT_LIMIT if limit is None else limit,
            )
        )

    async def get_latest_models(
        self, limit: int | None = DEFAULT_LIMIT, **options: Any
    ) -> PaginatedList[CatalogModel]:
        """List the newest models."""
        return await self.list_models(
            **self._with_defaults(
                options,
                sort=ModelSort.NEWEST,
                limit=DEFAULT_LIMIT if limit is None else limit,
            )
        )

    async def get_top_rated_models(
        self,
        period: TimePeriod | str | None = TimePeriod.ALL_TIME,
        limit: int | None = DEFAULT_LIMIT,
        **options: Any,
    ) -> PaginatedList[CatalogModel]:
        """List the highest rated models in a period (default: all time)."""
        return await self.list_models(
            **self._with_defaults(
                options,
                sort=ModelSort.HIGHEST_RATED,
                period=TimePeriod.ALL_TIME if period is None else period,
                limit=DEFAULT_LIMIT if limit is None else limit,
            )
        )

    @staticmethod
    def _with_defaults(options: dict[str, Any], **preset: Any) -> dict[str, Any]:
        """Apply the listing defaults, then the preset filters, then caller options.

        Caller options win over everything except a None value, which leaves
        the default in place.
        """
        merged: dict[str, Any] = {"limit": DEFAULT_LIMIT, "nsfw": DEFAULT_NSFW, **preset}
        merged.update({key: value for key, value in options.items() if value is not None})
        return merged
