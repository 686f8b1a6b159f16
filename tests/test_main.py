"""Tests for main entry point."""

from unittest.mock import MagicMock, patch

from vps_console.config import Settings


class TestMain:
    """Tests for __main__ module."""

    def test_runs_with_http_transport_by_default(self) -> None:
        mock_mcp = MagicMock()
        settings = Settings(http_host="127.0.0.1", http_port=8000)

        with patch("vps_console.__main__.mcp", mock_mcp), \
             patch("vps_console.__main__.Settings.from_env", return_value=settings):
            from vps_console.__main__ import run_server
            run_server()

        mock_mcp.run.assert_called_once_with(
            transport="http",
            host="127.0.0.1",
            port=8000,
        )

    def test_runs_with_stdio_when_configured(self) -> None:
        mock_mcp = MagicMock()
        settings = Settings(transport="stdio")

        with patch("vps_console.__main__.mcp", mock_mcp), \
             patch("vps_console.__main__.Settings.from_env", return_value=settings):
            from vps_console.__main__ import run_server
            run_server()

        mock_mcp.run.assert_called_once_with(transport="stdio")
