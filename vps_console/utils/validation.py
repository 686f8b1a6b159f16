"""Path and input validation utilities."""

import posixpath
from typing import Final

# Characters that have no business in a logical host id
SUSPICIOUS_ID_CHARS: Final[list[str]] = [
    "/", "\\", ";", "&", "|", "$", "`", "\n", "\r", "\x00", " ", '"', "'",
]


def normalize_remote_path(path: str | None) -> str:
    """Normalize a remote absolute path.

    Empty values become ``/``. ``..`` segments and repeated slashes are
    collapsed, so the result is always a clean ``/``-rooted path.

    Args:
        path: Path as supplied by the caller

    Returns:
        Normalized absolute path

    Raises:
        ValueError: If the path is relative or contains a null byte
    """
    if not path or not path.strip():
        return "/"

    path = path.strip()

    if "\x00" in path:
        raise ValueError(f"Path contains null byte: {path!r}")

    if not path.startswith("/"):
        raise ValueError(f"Path must be absolute: {path}")

    normalized = posixpath.normpath(path)

    # normpath preserves exactly two leading slashes (POSIX allows it)
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")

    return normalized


def join_remote_path(parent: str, name: str) -> str:
    """Join a listed name onto its parent directory.

    Args:
        parent: Absolute parent directory
        name: Bare entry name from a listing

    Returns:
        Normalized absolute path of the entry
    """
    parent = normalize_remote_path(parent)
    if parent == "/":
        return normalize_remote_path(f"/{name}")
    return normalize_remote_path(f"{parent}/{name}")


def validate_server_id(server_id: str | None) -> str:
    """Validate a logical host id.

    Args:
        server_id: The id to validate

    Returns:
        Stripped id

    Raises:
        ValueError: If the id is empty or contains suspicious characters
    """
    if not server_id or not server_id.strip():
        raise ValueError("Server ID is required")

    server_id = server_id.strip()
    if len(server_id) > 128:
        raise ValueError(f"Server ID too long: {len(server_id)} chars")

    for char in SUSPICIOUS_ID_CHARS:
        if char in server_id:
            raise ValueError(f"Server ID contains invalid characters: {server_id!r}")

    return server_id
