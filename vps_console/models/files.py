"""File browser data models."""

import base64
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FileKind(str, Enum):
    """Kind of a listed entry."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FileEntry:
    """One entry of a directory listing."""

    name: str
    kind: FileKind
    modified: str
    permissions: str
    owner: str
    path: str
    size: int | None = None

    @property
    def id(self) -> str:
        """Stable key derived from the absolute path."""
        return base64.urlsafe_b64encode(self.path.encode("utf-8")).decode("ascii")

    @property
    def is_directory(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.kind.value,
            "size": self.size,
            "modified": self.modified,
            "permissions": self.permissions,
            "owner": self.owner,
            "path": self.path,
        }


@dataclass
class DirectoryListing:
    """Result of listing a remote directory.

    An unreadable directory yields no entries and a populated ``error``,
    so callers can tell it apart from an empty one.
    """

    path: str
    entries: list[FileEntry] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class FileContent:
    """Bounded content of a remote file.

    ``content`` is base64 text when ``is_binary`` is set.
    """

    path: str
    content: str
    is_binary: bool
    mime_type: str
    truncated: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "isBinary": self.is_binary,
            "mimeType": self.mime_type,
            "truncated": self.truncated,
        }
