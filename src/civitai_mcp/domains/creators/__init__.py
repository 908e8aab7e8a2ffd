"""Creators domain - browsing model creators."""

from civitai_mcp.domains.creators.models import Creator, CreatorsParams

__all__ = ["Creator", "CreatorsParams"]
