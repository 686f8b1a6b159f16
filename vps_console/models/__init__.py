"""Data models for VPS Console."""

from vps_console.models.command import ExecutionRequest, ExecutionResult
from vps_console.models.files import DirectoryListing, FileContent, FileEntry, FileKind
from vps_console.models.host import HostCredential

__all__ = [
    "DirectoryListing",
    "ExecutionRequest",
    "ExecutionResult",
    "FileContent",
    "FileEntry",
    "FileKind",
    "HostCredential",
]
