"""Catalog domain - Civitai models, model versions and downloads."""

from civitai_mcp.domains.catalog.models import (
    CatalogModel,
    FileMetadata,
    ModelFile,
    ModelsParams,
    ModelSummary,
    ModelVersion,
    ModelVersionDetail,
)

__all__ = [
    "CatalogModel",
    "FileMetadata",
    "ModelFile",
    "ModelSummary",
    "ModelVersion",
    "ModelVersionDetail",
    "ModelsParams",
]
