"""Logging middleware for tool calls and MCP traffic."""

import json
import logging
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from vps_console.middleware.base import ConsoleMiddleware

# Methods with a dedicated hook below.
_HANDLED_METHODS = ("tools/call", "tools/list")


class LoggingMiddleware(ConsoleMiddleware):
    """Logs tool name, arguments, outcome and duration of each MCP call.

    Calls slower than ``slow_threshold_ms`` are logged at WARNING.

    Example:
        >>> mcp.add_middleware(LoggingMiddleware(include_payloads=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 1000,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Whether to log request/response payloads.
            max_payload_length: Maximum payload length before truncation.
            slow_threshold_ms: Threshold in ms for slow request warnings.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def _truncate(self, data: Any) -> str:
        try:
            text = json.dumps(data, default=str)
        except (TypeError, ValueError):
            text = str(data)
        if len(text) > self.max_payload_length:
            return text[: self.max_payload_length] + "... [truncated]"
        return text

    def _format_args(self, args: dict[str, Any] | None) -> str:
        if not args:
            return "()"
        parts = []
        for key, value in args.items():
            if isinstance(value, str) and len(value) > 60:
                value = value[:60] + "..."
            parts.append(f"{key}={value!r}")
        return f"({', '.join(parts)})"

    def _format_duration(self, duration_ms: float) -> str:
        if duration_ms >= self.slow_threshold_ms:
            return f"{duration_ms:.1f}ms SLOW!"
        return f"{duration_ms:.1f}ms"

    def _level_for(self, duration_ms: float) -> int:
        if duration_ms >= self.slow_threshold_ms:
            return logging.WARNING
        return logging.INFO

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log tool calls with name, arguments and timing."""
        start = time.perf_counter()
        tool_name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None)

        self.logger.info(">>> TOOL: %s%s", tool_name, self._format_args(args))
        if self.include_payloads and args:
            self.logger.debug("    Args: %s", self._truncate(args))

        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! TOOL: %s -> %s: %s [%s]",
                tool_name,
                type(e).__name__,
                e,
                self._format_duration(duration_ms),
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        self.logger.log(
            self._level_for(duration_ms),
            "<<< TOOL: %s -> %s [%s]",
            tool_name,
            summarize_result(result),
            self._format_duration(duration_ms),
        )
        if self.include_payloads and result is not None:
            self.logger.debug("    Result: %s", self._truncate(result))
        return result

    async def on_list_tools(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log tool listing requests."""
        start = time.perf_counter()
        result = await call_next(context)
        duration_ms = (time.perf_counter() - start) * 1000

        count: int | str = "?"
        if hasattr(result, "tools"):
            count = len(result.tools)
        elif isinstance(result, (list, tuple)):
            count = len(result)
        self.logger.info(
            "<<< LIST TOOLS -> %s tool(s) [%s]",
            count,
            self._format_duration(duration_ms),
        )
        return result

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log remaining MCP methods at DEBUG."""
        method = context.method
        if method in _HANDLED_METHODS:
            return await call_next(context)

        start = time.perf_counter()
        self.logger.debug(">>> MCP: %s", method)
        try:
            result = await call_next(context)
        except Exception as e:
            self.logger.error("!!! MCP: %s -> %s: %s", method, type(e).__name__, e)
            raise
        duration_ms = (time.perf_counter() - start) * 1000
        self.logger.debug("<<< MCP: %s [%s]", method, self._format_duration(duration_ms))
        return result


def summarize_result(result: Any) -> str:
    """Brief description of a tool result for log lines."""
    if result is None:
        return "null"
    if isinstance(result, str):
        lines = result.count("\n") + 1
        if lines > 1:
            return f"{len(result)} chars, {lines} lines"
        return f"{len(result)} chars"
    if isinstance(result, (list, tuple)):
        return f"{len(result)} items"
    if isinstance(result, dict):
        return f"{len(result)} keys"
    content = getattr(result, "content", None)
    if isinstance(content, (list, tuple)):
        return f"{len(content)} content item(s)"
    return type(result).__name__
