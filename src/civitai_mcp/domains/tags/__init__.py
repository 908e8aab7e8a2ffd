"""Tags domain - browsing model tags."""

from civitai_mcp.domains.tags.models import Tag, TagsParams

__all__ = ["Tag", "TagsParams"]
