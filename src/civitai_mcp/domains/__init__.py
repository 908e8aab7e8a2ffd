"""Domain modules grouping Civitai entities with their MCP tools."""
