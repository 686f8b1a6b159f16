"""MIME type detection utilities."""

import posixpath

# Extensions fetched as base64 rather than text
BINARY_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
}


def _extension(path: str) -> str:
    return posixpath.splitext(path)[1].lower()


def get_mime_type(path: str) -> str:
    """Infer MIME type from file extension.

    Args:
        path: File path to analyze.

    Returns:
        MIME type string, defaults to 'text/plain'.
    """
    return BINARY_MIME_TYPES.get(_extension(path), "text/plain")


def is_binary_path(path: str) -> bool:
    """Whether a file should be fetched base64-encoded, judged by extension only."""
    return _extension(path) in BINARY_MIME_TYPES
