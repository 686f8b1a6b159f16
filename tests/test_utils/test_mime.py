"""Tests for MIME type detection."""

import pytest

from vps_console.utils.mime import get_mime_type, is_binary_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/a/logo.png", "image/png"),
        ("/a/photo.JPG", "image/jpeg"),
        ("/a/photo.jpeg", "image/jpeg"),
        ("/a/anim.gif", "image/gif"),
        ("/a/icon.svg", "image/svg+xml"),
        ("/a/pic.webp", "image/webp"),
        ("/favicon.ico", "image/x-icon"),
        ("/etc/nginx/nginx.conf", "text/plain"),
        ("/usr/bin/python3", "text/plain"),
    ],
)
def test_get_mime_type(path: str, expected: str) -> None:
    assert get_mime_type(path) == expected


def test_is_binary_path() -> None:
    assert is_binary_path("/srv/logo.PNG")
    assert not is_binary_path("/srv/deploy.sh")
    assert not is_binary_path("/srv/archive.png.txt")
