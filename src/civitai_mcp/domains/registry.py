"""Registry of the core domain plugins."""

from civitai_mcp import __version__
from civitai_mcp.domains.catalog.tools import register_tools as register_catalog_tools
from civitai_mcp.domains.creators.tools import register_tools as register_creator_tools
from civitai_mcp.domains.images.tools import register_tools as register_image_tools
from civitai_mcp.domains.tags.tools import register_tools as register_tag_tools
from civitai_mcp.plugin import DomainPlugin, PluginMetadata


def get_core_plugins() -> list[DomainPlugin]:
    """Create one plugin per core domain."""
    return [
        DomainPlugin(
            PluginMetadata(
                name="catalog",
                version=__version__,
                description="Search, inspect and download Civitai models and model versions",
            ),
            register_catalog_tools,
        ),
        DomainPlugin(
            PluginMetadata(
                name="images",
                version=__version__,
                description="Browse images generated with Civitai models",
            ),
            register_image_tools,
        ),
        DomainPlugin(
            PluginMetadata(
                name="creators",
                version=__version__,
                description="Browse Civitai model creators",
            ),
            register_creator_tools,
        ),
        DomainPlugin(
            PluginMetadata(
                name="tags",
                version=__version__,
                description="Browse Civitai model tags",
            ),
            register_tag_tools,
        ),
    ]
