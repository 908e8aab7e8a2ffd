"""Entry point for Civitai MCP server."""

import argparse
import logging
import sys
from typing import Any

from civitai_mcp import __version__
from civitai_mcp.config import LogLevel, TransportMode, load_config
from civitai_mcp.utils.errors import ConfigurationError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the server.

    Logs go to stderr so they never mix with the stdio transport.
    """
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="civitai-mcp",
        description="MCP server for the Civitai API",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Transport options
    parser.add_argument(
        "--transport",
        choices=[mode.value for mode in TransportMode],
        default=None,
        help="Transport mode (default: from config or stdio)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind HTTP server to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind HTTP server to (default: 8000)",
    )

    # Civitai API options
    parser.add_argument(
        "--api-key",
        default=None,
        help="Civitai API key (default: CIVITAI_API_KEY)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Civitai API base URL (default: https://civitai.com/api/v1)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the settings given on the command line."""
    overrides: dict[str, Any] = {}

    if args.transport:
        overrides["transport"] = TransportMode(args.transport)
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.api_key:
        overrides["api_key"] = args.api_key
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.log_level:
        overrides["log_level"] = LogLevel(args.log_level)

    return overrides


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(**config_overrides(args))
    except ConfigurationError as e:
        setup_logging(LogLevel.ERROR)
        logging.getLogger(__name__).error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Starting Civitai MCP server v{__version__}")

    from civitai_mcp.server import create_server

    mcp = create_server(config)

    if config.transport == TransportMode.STDIO:
        logger.info("Running with stdio transport")
    else:
        logger.info(
            f"Running with {config.transport.value} transport on {config.host}:{config.port}"
        )
    mcp.run(transport=config.transport.value)

    return 0


if __name__ == "__main__":
    sys.exit(main())
