"""MCP tool handlers for terminal, file browser and host list."""

import logging
from typing import Any

from vps_console.dependencies import Dependencies
from vps_console.utils.ping import probe_hosts
from vps_console.utils.validation import validate_server_id

logger = logging.getLogger(__name__)


async def handle_execute(
    deps: Dependencies,
    server_id: str,
    command: str,
    cwd: str = "/",
) -> dict[str, str]:
    """Run a terminal command in a working directory.

    Returns:
        {"output": ..., "cwd": ...}; pass ``cwd`` back on the next call to
        keep the session's working directory
    """
    server_id = validate_server_id(server_id)
    result = await deps.client.execute(server_id, command, cwd)
    return result.to_dict()


async def handle_list_directory(
    deps: Dependencies,
    server_id: str,
    path: str = "/",
) -> dict[str, Any]:
    """List a remote directory.

    Returns:
        {"path": ..., "entries": [...], "error": str | None}
    """
    server_id = validate_server_id(server_id)
    listing = await deps.client.list_directory(server_id, path)
    return {
        "path": listing.path,
        "entries": [entry.to_dict() for entry in listing],
        "error": listing.error,
    }


async def handle_read_file(
    deps: Dependencies,
    server_id: str,
    path: str,
) -> dict[str, Any]:
    """Read bounded file content; images come back base64-encoded."""
    server_id = validate_server_id(server_id)
    content = await deps.client.read_file(server_id, path)
    return content.to_dict()


async def handle_hosts_list(deps: Dependencies, check_online: bool = True) -> str:
    """List configured hosts with online status.

    Returns:
        Formatted host list, secrets omitted
    """
    hosts = deps.client.list_hosts()
    if not hosts:
        return "No SSH hosts configured."

    online = await probe_hosts(hosts) if check_online else {}

    lines = ["Available hosts:"]
    for host in hosts:
        if check_online:
            is_online = online.get(host.id, False)
            status = f"[{'✓' if is_online else '✗'}] "
            state = " (online)" if is_online else " (offline)"
        else:
            status, state = "", ""
        lines.append(f"  {status}{host.id}{state} {host.name} -> {host.address}")
    return "\n".join(lines)
