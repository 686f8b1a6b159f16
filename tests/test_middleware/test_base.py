"""Tests for middleware base class."""

from unittest.mock import MagicMock

from fastmcp.server.middleware import Middleware

from vps_console.middleware import ConsoleMiddleware, ErrorHandlingMiddleware


def test_console_middleware_has_logger() -> None:
    middleware = ConsoleMiddleware()
    assert isinstance(middleware, Middleware)
    assert middleware.logger.name == "vps_console.middleware.base"


def test_console_middleware_accepts_custom_logger() -> None:
    custom_logger = MagicMock()
    assert ErrorHandlingMiddleware(logger=custom_logger).logger is custom_logger
