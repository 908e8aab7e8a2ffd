"""Tests for the command line entry point."""

from unittest.mock import MagicMock, patch

import pytest

from civitai_mcp import __version__
from civitai_mcp.__main__ import config_overrides, main, parse_args
from civitai_mcp.config import LogLevel, TransportMode


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults_leave_config_alone(self) -> None:
        assert config_overrides(parse_args([])) == {}

    def test_overrides(self) -> None:
        args = parse_args(
            [
                "--transport",
                "streamable-http",
                "--host",
                "0.0.0.0",
                "--port",
                "9000",
                "--api-key",
                "abc",
                "--base-url",
                "https://example.test/api/v1",
                "--log-level",
                "DEBUG",
            ]
        )

        assert config_overrides(args) == {
            "transport": TransportMode.STREAMABLE_HTTP,
            "host": "0.0.0.0",
            "port": 9000,
            "api_key": "abc",
            "base_url": "https://example.test/api/v1",
            "log_level": LogLevel.DEBUG,
        }

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--version"])

        assert __version__ in capsys.readouterr().out

    def test_unknown_transport(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--transport", "carrier-pigeon"])


class TestMain:
    """Test main()."""

    def test_runs_with_selected_transport(self) -> None:
        mcp = MagicMock()
        with (
            patch("civitai_mcp.__main__.setup_logging"),
            patch("civitai_mcp.server.create_server", return_value=mcp) as create,
        ):
            exit_code = main(["--transport", "sse", "--api-key", "abc"])

        assert exit_code == 0
        config = create.call_args.args[0]
        assert config.api_key == "abc"
        mcp.run.assert_called_once_with(transport="sse")

    def test_invalid_config(self) -> None:
        with (
            patch("civitai_mcp.__main__.setup_logging"),
            patch("civitai_mcp.server.create_server") as create,
        ):
            exit_code = main(["--port", "0"])

        assert exit_code == 1
        create.assert_not_called()
