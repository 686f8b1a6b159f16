"""Utilities for VPS Console."""

from vps_console.utils.console import ColorfulFormatter, RequestFormatter
from vps_console.utils.mime import get_mime_type, is_binary_path
from vps_console.utils.ping import is_port_open, probe_hosts
from vps_console.utils.shell import double_quote, quote_path
from vps_console.utils.validation import (
    join_remote_path,
    normalize_remote_path,
    validate_server_id,
)

__all__ = [
    "ColorfulFormatter",
    "double_quote",
    "get_mime_type",
    "is_binary_path",
    "is_port_open",
    "join_remote_path",
    "normalize_remote_path",
    "probe_hosts",
    "quote_path",
    "RequestFormatter",
    "validate_server_id",
]
