"""VPS Console middleware components."""

from vps_console.middleware.base import ConsoleMiddleware
from vps_console.middleware.errors import ErrorHandlingMiddleware
from vps_console.middleware.logging import LoggingMiddleware

__all__ = [
    "ConsoleMiddleware",
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
]
