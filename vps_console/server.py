"""VPS Console FastMCP server.

Thin wiring layer: builds the dependency container, registers the MCP tools
and the dashboard HTTP routes, and installs middleware. Behaviour lives in
services/, tools/ and routes.
"""

import logging
import sys
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from vps_console.config import Settings
from vps_console.dependencies import Dependencies
from vps_console.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from vps_console.routes import register_routes
from vps_console.tools import (
    handle_execute,
    handle_hosts_list,
    handle_list_directory,
    handle_read_file,
)
from vps_console.utils.console import RequestFormatter

NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "asyncssh",
    "httpx",
    "httpcore",
    "fastmcp",
    "starlette",
    "anyio",
)


def _configure_logging(settings: Settings | None = None) -> None:
    """Configure console logging for the vps_console package.

    Runs at import so loggers are ready however the server is started.
    """
    settings = settings or Settings.from_env()
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("vps_console")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(RequestFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        noisy = logging.getLogger(name)
        noisy.setLevel(logging.WARNING)
        noisy.handlers = []
        noisy.propagate = False

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


def make_lifespan(
    deps: Dependencies,
) -> Callable[[FastMCP], AbstractAsyncContextManager[dict[str, Any]]]:
    """Build the server lifespan around an existing dependency container."""

    @asynccontextmanager
    async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
        logger.info("VPS Console server starting up")
        hosts = deps.client.list_hosts()
        logger.info(
            "Client=%s, %d host(s): %s",
            deps.config.client,
            len(hosts),
            ", ".join(host.id for host in hosts) if hosts else "(none)",
        )
        try:
            yield {"hosts": [host.id for host in hosts]}
        finally:
            logger.info("VPS Console server shutdown complete")

    return app_lifespan


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Install middleware: ErrorHandling (inner) then Logging (outer).

    Args:
        server: The FastMCP server to configure.
        settings: Supplies payload logging, slow threshold and traceback flags.
    """
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def register_tools(server: FastMCP, deps: Dependencies) -> None:
    """Register the MCP tools, each bound to ``deps``."""

    @server.tool()
    async def execute(server_id: str, command: str, cwd: str = "/") -> dict[str, str]:
        """Run a shell command on a configured host.

        Args:
            server_id: Host id, e.g. "vps-1" or "vps-ssh-2"
            command: Command line to run
            cwd: Working directory returned by the previous call

        Returns:
            {"output": ..., "cwd": ...}; send cwd back on the next call.
        """
        return await handle_execute(deps, server_id, command, cwd)

    @server.tool()
    async def list_directory(server_id: str, path: str = "/") -> dict[str, Any]:
        """List the entries of a remote directory.

        Args:
            server_id: Host id
            path: Absolute directory path
        """
        return await handle_list_directory(deps, server_id, path)

    @server.tool()
    async def read_file(server_id: str, path: str) -> dict[str, Any]:
        """Read a remote file.

        Text files are capped at the configured size and flagged when
        truncated; images come back base64-encoded with isBinary set.
        """
        return await handle_read_file(deps, server_id, path)

    @server.tool()
    async def list_hosts(check_online: bool = True) -> str:
        """List configured hosts and whether they answer on their SSH port."""
        return await handle_hosts_list(deps, check_online=check_online)


def create_server(deps: Dependencies | None = None) -> FastMCP:
    """Create and configure the server with middleware, tools and routes.

    Args:
        deps: Dependency container; built from the environment when omitted.

    Returns:
        Configured FastMCP server instance
    """
    deps = deps or Dependencies.create()

    server = FastMCP("vps_console", lifespan=make_lifespan(deps))
    configure_middleware(server, deps.config.settings)
    register_tools(server, deps)
    register_routes(server, deps)

    logger.debug("Server created (client=%s)", deps.config.client)
    return server


# Default server instance
mcp = create_server()
