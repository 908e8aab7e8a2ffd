"""Pydantic models for Civitai creators."""

from typing import Any

from pydantic import Field

from civitai_mcp.models.common import (
    CivitaiEntity,
    PaginatedList,
    QueryParams,
    WholeNumber,
)
from civitai_mcp.models.validation import ValidationResult, validate_as


class Creator(CivitaiEntity):
    """A user who publishes models."""

    username: str
    image: str | None = Field(None, description="Avatar URL")
    model_count: WholeNumber | None = None
    link: str | None = Field(None, description="API link to the creator's models")


class CreatorsParams(QueryParams):
    """Filters accepted by the creators endpoint."""

    query: str | None = Field(None, description="Search by username")


def validate_creator(data: Any) -> ValidationResult[Creator]:
    """Validate a single creator payload."""
    return validate_as(Creator, data)


def validate_creators_page(data: Any) -> ValidationResult[PaginatedList[Creator]]:
    """Validate a page of creators."""
    return validate_as(PaginatedList[Creator], data)
