"""Response shaping for MCP tool results.

Tools return plain dicts. ResponseBuilder turns validated Civitai entities
into compact dicts sized for an LLM context window, with a Verbosity level
controlling how much of each entity is included.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from civitai_mcp.utils.errors import (
    APIStatusError,
    CivitaiError,
    NotFoundError,
    RequestFailedError,
    ResponseValidationError,
)

if TYPE_CHECKING:
    from civitai_mcp.domains.catalog.models import (
        CatalogModel,
        ModelFile,
        ModelVersion,
        ModelVersionDetail,
    )
    from civitai_mcp.domains.creators.models import Creator
    from civitai_mcp.domains.images.models import Image
    from civitai_mcp.domains.tags.models import Tag
    from civitai_mcp.models.common import Metadata, PaginatedList, Stats

DESCRIPTION_LIMIT = 200
LIST_TAG_LIMIT = 5


class Verbosity(str, Enum):
    """Response detail level."""

    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"

    @classmethod
    def from_str(cls, value: str | None) -> Verbosity:
        """Parse a verbosity string, defaulting to STANDARD."""
        if not value:
            return cls.STANDARD
        try:
            return cls(value.lower())
        except ValueError:
            return cls.STANDARD


def truncate(text: str | None, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut text to ``limit`` characters, marking the cut with an ellipsis."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _value(member: Any) -> Any:
    """Unwrap enum members so results stay JSON-serialisable."""
    return getattr(member, "value", member)


def error_response(exc: CivitaiError) -> dict[str, Any]:
    """Map a client failure to a tool error payload."""
    if isinstance(exc, NotFoundError):
        return {"error": "Not found", "message": str(exc), "status_code": exc.status_code}
    if isinstance(exc, APIStatusError):
        return {"error": "Civitai API error", "message": str(exc), "status_code": exc.status_code}
    if isinstance(exc, RequestFailedError):
        return {"error": "Request failed", "message": str(exc)}
    if isinstance(exc, ResponseValidationError):
        return {"error": "Unexpected response from Civitai", "message": str(exc)}
    return {"error": "Civitai error", "message": str(exc)}


class ResponseBuilder:
    """Builds tool result dicts from Civitai entities."""

    @staticmethod
    def pagination(metadata: Metadata, item_count: int) -> dict[str, Any]:
        """Normalize pagination metadata, filling gaps from the page itself."""
        result: dict[str, Any] = {
            "current_page": metadata.current_page or 1,
            "total_pages": metadata.total_pages or 1,
            "total_items": metadata.total_items or item_count,
            "has_next_page": metadata.has_next_page,
        }
        if metadata.next_cursor is not None:
            result["next_cursor"] = metadata.next_cursor
        return result

    @staticmethod
    def page(page: PaginatedList[Any], items: list[dict[str, Any]]) -> dict[str, Any]:
        """Wrap formatted items with the pagination block of their page."""
        return {
            "items": items,
            "pagination": ResponseBuilder.pagination(page.metadata, len(items)),
        }

    @staticmethod
    def stats_summary(stats: Stats | None) -> dict[str, Any]:
        """Headline counters with missing values reported as zero."""
        return {
            "downloads": (stats.download_count if stats else None) or 0,
            "rating": (stats.rating if stats else None) or 0,
            "favorites": (stats.favorite_count if stats else None) or 0,
        }

    @staticmethod
    def file_item(file: ModelFile) -> dict[str, Any]:
        """Summarize a model file."""
        metadata = file.metadata
        size_mb = file.size_mb
        return {
            "size_mb": round(size_mb, 1) if size_mb is not None else None,
            "format": _value(metadata.format) if metadata else None,
            "fp": _value(metadata.fp) if metadata else None,
            "primary": bool(file.primary),
            "scan_status": {
                "pickle": file.pickle_scan_result,
                "virus": file.virus_scan_result,
            },
        }

    @staticmethod
    def version_summary(version: ModelVersion) -> dict[str, Any]:
        """Summarize a model version embedded in a model."""
        return {
            "id": version.id,
            "name": version.name,
            "created_at": version.created_at,
            "base_model": version.base_model,
            "trained_words": version.trained_words or [],
        }

    @staticmethod
    def model_list_item(
        model: CatalogModel, verbosity: Verbosity = Verbosity.STANDARD
    ) -> dict[str, Any]:
        """Format a model for list responses.

        Args:
            model: The model to format.
            verbosity: MINIMAL returns identity only; FULL adds every tag,
                the untruncated description and the version count.

        Returns:
            Dict with model information.
        """
        result: dict[str, Any] = {
            "id": model.id,
            "name": model.name,
            "type": _value(model.type),
        }
        if verbosity == Verbosity.MINIMAL:
            return result

        latest = model.latest_version
        result.update(
            {
                "creator": model.creator.username,
                "nsfw": model.nsfw,
                "stats": ResponseBuilder.stats_summary(model.stats),
                "latest_version": ResponseBuilder.version_summary(latest) if latest else None,
            }
        )

        if verbosity == Verbosity.FULL:
            result["description"] = model.description
            result["tags"] = model.tags
            result["version_count"] = len(model.model_versions)
            result["mode"] = _value(model.mode)
        else:
            result["description"] = truncate(model.description)
            result["tags"] = model.tags[:LIST_TAG_LIMIT]

        return result

    @staticmethod
    def model_detail(model: CatalogModel) -> dict[str, Any]:
        """Format a single model with all of its versions."""
        return {
            "id": model.id,
            "name": model.name,
            "type": _value(model.type),
            "description": model.description,
            "creator": {
                "username": model.creator.username,
                "avatar": model.creator.image,
            },
            "tags": model.tags,
            "nsfw": model.nsfw,
            "mode": _value(model.mode),
            "stats": model.stats.to_dict() if model.stats else {},
            "versions": [
                {
                    **ResponseBuilder.version_summary(version),
                    "description": version.description,
                    "download_url": version.download_url,
                    "stats": version.stats.to_dict() if version.stats else {},
                    "files": [ResponseBuilder.file_item(f) for f in version.files or []],
                    "image_count": len(version.images or []),
                }
                for version in model.model_versions
            ],
        }

    @staticmethod
    def version_detail(version: ModelVersionDetail) -> dict[str, Any]:
        """Format a model version fetched by id or hash."""
        return {
            "id": version.id,
            "name": version.name,
            "model_id": version.model_id,
            "model": {
                "name": version.model.name,
                "type": _value(version.model.type),
                "nsfw": version.model.nsfw,
            },
            "description": version.description,
            "created_at": version.created_at,
            "base_model": version.base_model,
            "download_url": version.download_url,
            "trained_words": version.trained_words,
            "stats": version.stats.to_dict(),
            "files": [ResponseBuilder.file_item(f) for f in version.files],
            "image_count": len(version.images),
        }

    @staticmethod
    def image_item(image: Image, verbosity: Verbosity = Verbosity.STANDARD) -> dict[str, Any]:
        """Format an image for list responses.

        Generation metadata is only included at FULL verbosity, where it is
        passed through as-is.
        """
        result: dict[str, Any] = {
            "id": image.id,
            "url": image.url,
        }
        if verbosity == Verbosity.MINIMAL:
            return result

        stats = image.stats
        result.update(
            {
                "creator": image.username,
                "width": image.width,
                "height": image.height,
                "nsfw_level": _value(image.nsfw_level),
                "created_at": image.created_at,
                "post_id": image.post_id,
                "reactions": {
                    "hearts": (stats.heart_count if stats else None) or 0,
                    "likes": (stats.like_count if stats else None) or 0,
                    "comments": (stats.comment_count if stats else None) or 0,
                },
            }
        )

        if verbosity == Verbosity.FULL:
            result["hash"] = image.hash
            result["meta"] = image.meta
            result["model_version_ids"] = image.model_version_ids or []
        elif image.meta:
            result["has_generation_info"] = True

        return result

    @staticmethod
    def creator_item(creator: Creator) -> dict[str, Any]:
        """Format a creator."""
        return {
            "username": creator.username,
            "model_count": creator.model_count or 0,
            "link": creator.link,
            "avatar": creator.image,
        }

    @staticmethod
    def tag_item(tag: Tag) -> dict[str, Any]:
        """Format a tag."""
        return {
            "name": tag.name,
            "model_count": tag.model_count or 0,
            "link": tag.link,
        }
