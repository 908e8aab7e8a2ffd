"""Pydantic models for Civitai models, model versions and files."""

from enum import Enum
from typing import Annotated, Any

from pydantic import Field, PositiveInt

from civitai_mcp.domains.creators.models import Creator
from civitai_mcp.domains.images.models import Image
from civitai_mcp.models.common import (
    CivitaiEntity,
    CommercialUse,
    LaxEnum,
    ModelModeValue,
    ModelSort,
    ModelType,
    ModelTypeValue,
    PaginatedList,
    QueryParams,
    Stats,
    TimePeriod,
)
from civitai_mcp.models.validation import ValidationResult, validate_as


class FloatingPoint(str, Enum):
    """Weight precision of a model file."""

    FP16 = "fp16"
    FP32 = "fp32"
    BF16 = "bf16"


class FileSize(str, Enum):
    """Whether a checkpoint file is full or pruned."""

    FULL = "full"
    PRUNED = "pruned"


class FileFormat(str, Enum):
    """Serialization format of a model file."""

    SAFE_TENSOR = "SafeTensor"
    PICKLE_TENSOR = "PickleTensor"
    OTHER = "Other"


class FileMetadata(CivitaiEntity):
    """File metadata; upstream may null or omit any of the fields."""

    fp: Annotated[FloatingPoint, LaxEnum] | None = None
    size: Annotated[FileSize, LaxEnum] | None = None
    format: Annotated[FileFormat, LaxEnum] | None = None


class ModelFile(CivitaiEntity):
    """A downloadable file attached to a model version."""

    size_kb: float | None = Field(None, description="File size in kilobytes")
    pickle_scan_result: str | None = Field(None, description="Pickle scan status")
    virus_scan_result: str | None = Field(None, description="Virus scan status")
    scanned_at: str | None = Field(None, description="When the scans ran")
    primary: bool | None = Field(None, description="Whether this is the primary file")
    metadata: FileMetadata | None = None

    @property
    def size_mb(self) -> float | None:
        """File size in megabytes."""
        if self.size_kb is None:
            return None
        return self.size_kb / 1024


class ModelVersion(CivitaiEntity):
    """A version of a model as embedded in model responses.

    Versions are ordered newest first inside ``CatalogModel.model_versions``.
    """

    id: int
    name: str
    description: str | None = None
    created_at: str | None = None
    download_url: str | None = None
    trained_words: list[str] | None = None
    files: list[ModelFile] | None = None
    images: list[Image] | None = None
    stats: Stats | None = None
    index: int | None = None
    base_model: str | None = None

    @property
    def primary_file(self) -> ModelFile | None:
        """The file flagged as primary, falling back to the first file."""
        if not self.files:
            return None
        for file in self.files:
            if file.primary:
                return file
        return self.files[0]


class CatalogModel(CivitaiEntity):
    """A model listed on Civitai."""

    id: int
    name: str
    description: str
    type: ModelTypeValue
    nsfw: bool
    tags: list[str]
    mode: ModelModeValue | None = None
    creator: Creator
    stats: Stats | None = None
    model_versions: list[ModelVersion]
    poi: bool | None = None

    @property
    def latest_version(self) -> ModelVersion | None:
        """The most recent version; upstream lists versions newest first."""
        return self.model_versions[0] if self.model_versions else None


class ModelSummary(CivitaiEntity):
    """Parent model summary embedded in a model version response."""

    name: str
    type: ModelTypeValue
    nsfw: bool
    poi: bool | None = None
    mode: ModelModeValue | None = None


class ModelVersionDetail(CivitaiEntity):
    """A model version fetched on its own, by id or by file hash."""

    id: int
    name: str
    description: str | None = None
    model: ModelSummary
    model_id: int
    created_at: str
    download_url: str
    trained_words: list[str]
    files: list[ModelFile]
    stats: Stats
    images: list[Image]
    base_model: str | None = None


class ModelsParams(QueryParams):
    """Filters accepted by the models endpoint."""

    query: str | None = Field(None, description="Search by model name")
    tag: str | None = Field(None, description="Filter by tag name")
    username: str | None = Field(None, description="Filter by creator username")
    types: list[ModelType] | None = Field(None, description="Filter by model types")
    base_models: list[str] | None = Field(None, description="Filter by base model")
    ids: list[PositiveInt] | None = Field(None, description="Fetch specific model ids")
    sort: ModelSort | None = None
    period: TimePeriod | None = None
    favorites: bool | None = None
    hidden: bool | None = None
    primary_file_only: bool | None = None
    allow_no_credit: bool | None = None
    allow_derivatives: bool | None = None
    allow_different_licenses: bool | None = None
    allow_commercial_use: CommercialUse | None = None
    nsfw: bool | None = None
    supports_generation: bool | None = None


def validate_model(data: Any) -> ValidationResult[CatalogModel]:
    """Validate a single model payload."""
    return validate_as(CatalogModel, data)


def validate_model_version(data: Any) -> ValidationResult[ModelVersion]:
    """Validate a model version as embedded in a model."""
    return validate_as(ModelVersion, data)


def validate_model_version_detail(data: Any) -> ValidationResult[ModelVersionDetail]:
    """Validate a model version response (by id or by hash)."""
    return validate_as(ModelVersionDetail, data)


def validate_model_file(data: Any) -> ValidationResult[ModelFile]:
    """Validate a model file entry."""
    return validate_as(ModelFile, data)


def validate_models_page(data: Any) -> ValidationResult[PaginatedList[CatalogModel]]:
    """Validate a page of models."""
    return validate_as(PaginatedList[CatalogModel], data)
