"""Images domain - browsing images posted to Civitai."""

from civitai_mcp.domains.images.models import Image, ImagesParams

__all__ = ["Image", "ImagesParams"]
