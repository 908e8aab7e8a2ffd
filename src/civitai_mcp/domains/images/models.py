"""Pydantic models for Civitai images."""

from typing import Any

from pydantic import Field, PositiveInt

from civitai_mcp.models.common import (
    CivitaiEntity,
    ImageSort,
    NSFWLevel,
    NSFWLevelValue,
    PaginatedList,
    QueryParams,
    Stats,
    TimePeriod,
    WholeNumber,
)
from civitai_mcp.models.validation import ValidationResult, validate_as


class Image(CivitaiEntity):
    """An image posted to Civitai.

    ``id`` is missing from some listing contexts. ``nsfw_level`` is either a
    level name or a raw number depending on the endpoint, and whichever form
    upstream sent is kept. ``meta`` holds the generation parameters as an
    unvalidated mapping.
    """

    id: int | None = None
    url: str
    hash: str
    width: WholeNumber
    height: WholeNumber
    nsfw: bool | None = None
    nsfw_level: NSFWLevelValue | int | float | None = None
    created_at: str | None = None
    post_id: int | None = None
    stats: Stats | None = None
    meta: dict[str, Any] | None = None
    username: str | None = None
    model_version_ids: list[int] | None = None
    type: str | None = None
    browsing_level: int | None = None


class ImagesParams(QueryParams):
    """Filters accepted by the images endpoint."""

    post_id: PositiveInt | None = Field(None, description="Images from a specific post")
    model_id: PositiveInt | None = Field(None, description="Images from a specific model")
    model_version_id: PositiveInt | None = Field(
        None, description="Images from a specific model version"
    )
    username: str | None = Field(None, description="Images by a specific creator")
    nsfw: bool | NSFWLevel | None = Field(
        None, description="Include NSFW images (boolean) or cap at a named level"
    )
    sort: ImageSort | None = None
    period: TimePeriod | None = None


def validate_image(data: Any) -> ValidationResult[Image]:
    """Validate a single image payload."""
    return validate_as(Image, data)


def validate_images_page(data: Any) -> ValidationResult[PaginatedList[Image]]:
    """Validate a page of images."""
    return validate_as(PaginatedList[Image], data)
