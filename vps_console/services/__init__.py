"""Services for VPS Console."""

from vps_console.services.client import SSHHostClient
from vps_console.services.content import build_read_command, read_file
from vps_console.services.listing import (
    build_listing_command,
    list_directory,
    parse_listing,
)
from vps_console.services.mock import MockHostClient
from vps_console.services.shell import SENTINEL, ShellEmulator, build_command, split_output
from vps_console.services.transport import SSHTransport

__all__ = [
    "MockHostClient",
    "SENTINEL",
    "SSHHostClient",
    "SSHTransport",
    "ShellEmulator",
    "build_command",
    "build_listing_command",
    "build_read_command",
    "list_directory",
    "parse_listing",
    "read_file",
    "split_output",
]
