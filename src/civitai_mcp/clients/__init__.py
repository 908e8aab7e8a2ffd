"""HTTP clients for upstream APIs."""

from civitai_mcp.clients.civitai import CivitaiClient

__all__ = ["CivitaiClient"]
