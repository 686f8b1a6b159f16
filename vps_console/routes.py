"""HTTP API routes used by the dashboard's terminal and file browser.

Mounted on the FastMCP server as custom Starlette routes; each handler is
bound to the dependency container at registration time.
"""

import json
import logging
from collections.abc import Awaitable, Callable

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from vps_console.dependencies import Dependencies
from vps_console.errors import (
    ConfigurationError,
    FileReadError,
    HostNotFoundError,
    RemoteConsoleError,
    TransportError,
)
from vps_console.utils.validation import validate_server_id

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[Response]]


async def execute_command(deps: Dependencies, request: Request) -> JSONResponse:
    """POST /api/terminal/execute."""
    try:
        body = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"message": "Request body must be JSON"}, status_code=400)
    if not isinstance(body, dict):
        return JSONResponse({"message": "Request body must be an object"}, status_code=400)

    server_id = body.get("serverId")
    command = body.get("command")
    cwd = body.get("cwd") or "/"
    if not server_id or not command:
        return JSONResponse(
            {"message": "Server ID and command are required"}, status_code=400
        )
    if not all(isinstance(value, str) for value in (server_id, command, cwd)):
        return JSONResponse(
            {"message": "Server ID, command and cwd must be strings"}, status_code=400
        )

    try:
        server_id = validate_server_id(server_id)
        result = await deps.client.execute(server_id, command, cwd)
    except HostNotFoundError as e:
        return JSONResponse({"message": "Server not found", "error": str(e)}, status_code=404)
    except TransportError as e:
        logger.error("Terminal execution failed on %s: %s", server_id, e)
        return JSONResponse(
            {"message": "Failed to execute command", "error": str(e)},
            status_code=502,
        )
    except ValueError as e:
        return JSONResponse({"message": "Invalid request", "error": str(e)}, status_code=400)
    except RemoteConsoleError as e:
        logger.error("Terminal execution failed on %s: %s", server_id, e)
        return JSONResponse(
            {"message": "Failed to execute command", "error": str(e)},
            status_code=500,
        )

    return JSONResponse({"success": True, "output": result.output, "cwd": result.cwd})


async def list_files(deps: Dependencies, request: Request) -> JSONResponse:
    """GET /api/files?serverId=...&path=...

    A listing that fails on the remote side still answers 200 with an empty
    list; the failure is logged.
    """
    server_id = request.query_params.get("serverId")
    path = request.query_params.get("path") or "/"
    if not server_id:
        return JSONResponse({"error": "Server ID is required"}, status_code=400)

    try:
        listing = await deps.client.list_directory(validate_server_id(server_id), path)
    except HostNotFoundError as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except ConfigurationError as e:
        return JSONResponse({"error": str(e)}, status_code=500)

    if not listing.ok:
        logger.warning("Listing %s on %s failed: %s", path, server_id, listing.error)
    return JSONResponse([entry.to_dict() for entry in listing])


async def file_content(deps: Dependencies, request: Request) -> JSONResponse:
    """GET /api/files/content?serverId=...&path=..."""
    server_id = request.query_params.get("serverId")
    path = request.query_params.get("path")
    if not server_id or not path:
        return JSONResponse(
            {"error": "Server ID and path are required"}, status_code=400
        )

    try:
        content = await deps.client.read_file(validate_server_id(server_id), path)
    except HostNotFoundError as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except TransportError as e:
        logger.error("Reading %s on %s failed: %s", path, server_id, e)
        return JSONResponse({"error": str(e)}, status_code=502)
    except (FileReadError, ConfigurationError) as e:
        logger.warning("Reading %s on %s failed: %s", path, server_id, e)
        return JSONResponse({"error": str(e)}, status_code=500)

    return JSONResponse(content.to_dict())


async def list_hosts(deps: Dependencies, request: Request) -> JSONResponse:
    """GET /api/hosts, secrets omitted."""
    return JSONResponse([host.to_public_dict() for host in deps.client.list_hosts()])


async def health_check(request: Request) -> PlainTextResponse:
    """GET /health."""
    client_host = request.client.host if request.client else "unknown"
    logger.debug("Health check from %s", client_host)
    return PlainTextResponse("OK")


def _bind(
    handler: Callable[[Dependencies, Request], Awaitable[Response]],
    deps: Dependencies,
) -> Handler:
    async def endpoint(request: Request) -> Response:
        return await handler(deps, request)

    endpoint.__name__ = handler.__name__
    endpoint.__doc__ = handler.__doc__
    return endpoint


def register_routes(server: FastMCP, deps: Dependencies) -> None:
    """Mount the HTTP API on the server."""
    server.custom_route("/health", methods=["GET"])(health_check)
    server.custom_route("/api/terminal/execute", methods=["POST"])(
        _bind(execute_command, deps)
    )
    server.custom_route("/api/files", methods=["GET"])(_bind(list_files, deps))
    server.custom_route("/api/files/content", methods=["GET"])(
        _bind(file_content, deps)
    )
    server.custom_route("/api/hosts", methods=["GET"])(_bind(list_hosts, deps))
