"""Common Pydantic models shared across Civitai entities.

The Civitai API is not internally consistent: metadata fields come and go
between endpoints, and a few fields change type depending on the endpoint
(``nextCursor`` is a number or a string, an image's ``nsfwLevel`` is a level
name or a number). These models absorb that at the boundary so the rest of
the server sees one shape per entity.

Response entities validate strictly: a string is never coerced into a
number or a boolean. Union fields keep whatever representation upstream
sent.
"""

from enum import Enum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PositiveInt, Strict
from pydantic.alias_generators import to_camel

from civitai_mcp.models.validation import ValidationResult, validate_as

T = TypeVar("T")

# Enum values arrive as plain JSON strings, which strict mode would reject.
LaxEnum = Strict(False)


def _whole_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Counts and pixel sizes sometimes arrive as 512.0; strings are still rejected.
WholeNumber = Annotated[int, BeforeValidator(_whole_float_to_int)]


class ModelType(str, Enum):
    """Categories of models hosted on Civitai."""

    CHECKPOINT = "Checkpoint"
    TEXTUAL_INVERSION = "TextualInversion"
    HYPERNETWORK = "Hypernetwork"
    AESTHETIC_GRADIENT = "AestheticGradient"
    LORA = "LORA"
    CONTROLNET = "Controlnet"
    POSES = "Poses"


class ModelMode(str, Enum):
    """Availability mode of a model that is no longer generally available."""

    ARCHIVED = "Archived"
    TAKEN_DOWN = "TakenDown"


class NSFWLevel(str, Enum):
    """Named NSFW levels."""

    NONE = "None"
    SOFT = "Soft"
    MATURE = "Mature"
    X = "X"


class ModelSort(str, Enum):
    """Sort orders accepted by the models endpoint."""

    HIGHEST_RATED = "Highest Rated"
    MOST_DOWNLOADED = "Most Downloaded"
    NEWEST = "Newest"


class ImageSort(str, Enum):
    """Sort orders accepted by the images endpoint."""

    MOST_REACTIONS = "Most Reactions"
    MOST_COMMENTS = "Most Comments"
    NEWEST = "Newest"


class TimePeriod(str, Enum):
    """Time windows used when sorting by popularity or rating."""

    ALL_TIME = "AllTime"
    YEAR = "Year"
    MONTH = "Month"
    WEEK = "Week"
    DAY = "Day"


class CommercialUse(str, Enum):
    """Commercial use permissions a model license may grant."""

    NONE = "None"
    IMAGE = "Image"
    RENT = "Rent"
    SELL = "Sell"


ModelTypeValue = Annotated[ModelType, LaxEnum]
ModelModeValue = Annotated[ModelMode, LaxEnum]
NSFWLevelValue = Annotated[NSFWLevel, LaxEnum]


class CivitaiEntity(BaseModel):
    """Base class for entities decoded from Civitai responses.

    Attributes use snake_case; the upstream camelCase names are the aliases.
    Unknown keys are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=True,
        protected_namespaces=(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump the fields that were present in the payload, keyed by upstream name."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class QueryParams(BaseModel):
    """Base class for request parameter bags.

    Parameter bags come from tool arguments, so they are validated in lax
    mode. Unknown parameters are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        protected_namespaces=(),
    )

    limit: PositiveInt | None = Field(None, description="Number of results per page")
    page: PositiveInt | None = Field(None, description="Page number, starting at 1")

    def to_query(self) -> dict[str, Any]:
        """Return the set parameters keyed by their upstream names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Stats(CivitaiEntity):
    """Engagement counters.

    Every counter is optional because each endpoint fills in a different
    subset.
    """

    download_count: WholeNumber | None = None
    favorite_count: WholeNumber | None = None
    comment_count: WholeNumber | None = None
    rating_count: WholeNumber | None = None
    rating: float | None = None
    cry_count: WholeNumber | None = None
    laugh_count: WholeNumber | None = None
    like_count: WholeNumber | None = None
    heart_count: WholeNumber | None = None
    dislike_count: WholeNumber | None = None


class Metadata(CivitaiEntity):
    """Pagination metadata accompanying list responses."""

    total_items: WholeNumber | None = None
    current_page: WholeNumber | None = None
    page_size: WholeNumber | None = None
    total_pages: WholeNumber | None = None
    next_page: str | None = None
    prev_page: str | None = None
    # Number on some endpoints, opaque string on others.
    next_cursor: int | float | str | None = None

    @property
    def has_next_page(self) -> bool:
        """Whether upstream advertised another page."""
        return self.next_page is not None or self.next_cursor is not None


class PaginatedList(CivitaiEntity, Generic[T]):
    """A page of items plus pagination metadata."""

    items: list[T]
    metadata: Metadata


def validate_stats(data: Any) -> ValidationResult[Stats]:
    """Validate an engagement counters block."""
    return validate_as(Stats, data)


def validate_metadata(data: Any) -> ValidationResult[Metadata]:
    """Validate a pagination metadata block."""
    return validate_as(Metadata, data)
