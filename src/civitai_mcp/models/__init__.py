"""Shared schema building blocks for Civitai API payloads."""

from civitai_mcp.models.common import (
    CivitaiEntity,
    CommercialUse,
    ImageSort,
    Metadata,
    ModelMode,
    ModelSort,
    ModelType,
    NSFWLevel,
    PaginatedList,
    QueryParams,
    Stats,
    TimePeriod,
    validate_metadata,
    validate_stats,
)
from civitai_mcp.models.validation import (
    FieldError,
    Invalid,
    Valid,
    ValidationResult,
    validate_as,
)

__all__ = [
    "CivitaiEntity",
    "QueryParams",
    "Stats",
    "Metadata",
    "PaginatedList",
    "ModelType",
    "ModelMode",
    "NSFWLevel",
    "ModelSort",
    "ImageSort",
    "TimePeriod",
    "CommercialUse",
    "FieldError",
    "Valid",
    "Invalid",
    "ValidationResult",
    "validate_as",
    "validate_stats",
    "validate_metadata",
]
