"""Error handling middleware for consistent tool error responses."""

import logging
import traceback
from collections import defaultdict
from typing import Any

from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import MiddlewareContext

from vps_console.errors import (
    CommandTimeoutError,
    ConfigurationError,
    FileReadError,
    RemoteConsoleError,
    TransportError,
)
from vps_console.middleware.base import ConsoleMiddleware


def find_console_error(exc: BaseException) -> RemoteConsoleError | ValueError | None:
    """Find the domain error behind an exception, following its causes."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, (RemoteConsoleError, ValueError)):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def user_message(exc: RemoteConsoleError | ValueError) -> str:
    """Message shown to the caller; transport internals stay in the logs."""
    if isinstance(exc, CommandTimeoutError):
        return f"Command timed out on host {exc.host_id}"
    if isinstance(exc, TransportError):
        return f"Could not reach host {exc.host_id}"
    if isinstance(exc, FileReadError):
        return f"Could not read file {exc.path}: {exc.reason}"
    if isinstance(exc, ConfigurationError):
        return str(exc)
    return f"Invalid request: {exc}"


class ErrorHandlingMiddleware(ConsoleMiddleware):
    """Logs failures, tracks error counts and maps domain errors to ToolError.

    Example:
        >>> mcp.add_middleware(ErrorHandlingMiddleware(include_traceback=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback in logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Error counts keyed by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        self._error_counts.clear()

    def _log(self, method: str | None, exc: BaseException) -> None:
        error_type = type(exc).__name__
        self._error_counts[error_type] += 1
        if self.include_traceback:
            self.logger.error(
                "Error in %s: %s: %s\n%s",
                method,
                error_type,
                exc,
                traceback.format_exc(),
            )
        else:
            self.logger.error("Error in %s: %s: %s", method, error_type, exc)

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log errors for every request and re-raise them."""
        try:
            return await call_next(context)
        except Exception as e:
            self._log(context.method, e)
            raise

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Turn domain errors raised by tools into caller-facing ToolErrors."""
        try:
            return await call_next(context)
        except Exception as e:
            domain_error = find_console_error(e)
            if domain_error is None:
                raise
            raise ToolError(user_message(domain_error)) from e
