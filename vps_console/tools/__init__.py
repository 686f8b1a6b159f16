"""MCP tools for VPS Console."""

from vps_console.tools.handlers import (
    handle_execute,
    handle_hosts_list,
    handle_list_directory,
    handle_read_file,
)

__all__ = [
    "handle_execute",
    "handle_hosts_list",
    "handle_list_directory",
    "handle_read_file",
]
