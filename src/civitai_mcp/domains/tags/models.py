"""Pydantic models for Civitai tags."""

from typing import Any

from pydantic import Field

from civitai_mcp.models.common import (
    CivitaiEntity,
    PaginatedList,
    QueryParams,
    WholeNumber,
)
from civitai_mcp.models.validation import ValidationResult, validate_as


class Tag(CivitaiEntity):
    """A tag used to categorize models."""

    name: str
    model_count: WholeNumber | None = None
    link: str | None = None


class TagsParams(QueryParams):
    """Filters accepted by the tags endpoint."""

    query: str | None = Field(None, description="Search by tag name")


def validate_tag(data: Any) -> ValidationResult[Tag]:
    """Validate a single tag payload."""
    return validate_as(Tag, data)


def validate_tags_page(data: Any) -> ValidationResult[PaginatedList[Tag]]:
    """Validate a page of tags."""
    return validate_as(PaginatedList[Tag], data)
