"""Tests for path and server id validation."""

import pytest

from vps_console.utils.validation import (
    join_remote_path,
    normalize_remote_path,
    validate_server_id,
)


class TestNormalizeRemotePath:
    """Test remote path normalization."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_is_root(self, value):
        assert normalize_remote_path(value) == "/"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("/var/log", "/var/log"),
            ("/var/log/", "/var/log"),
            ("/var//log", "/var/log"),
            ("/var/log/../www", "/var/www"),
            ("/..", "/"),
            ("//etc", "/etc"),
            ("/home/admin/release notes.txt", "/home/admin/release notes.txt"),
        ],
    )
    def test_normalizes(self, value, expected):
        assert normalize_remote_path(value) == expected

    def test_relative_path_rejected(self):
        with pytest.raises(ValueError, match="absolute"):
            normalize_remote_path("etc/passwd")

    def test_null_byte_rejected(self):
        with pytest.raises(ValueError, match="null byte"):
            normalize_remote_path("/etc/passwd\x00.txt")


class TestJoinRemotePath:
    """Test joining listed names onto their parent."""

    def test_root_parent(self):
        assert join_remote_path("/", "notes.txt") == "/notes.txt"

    def test_nested_parent(self):
        assert join_remote_path("/home/admin", "notes.txt") == "/home/admin/notes.txt"

    def test_trailing_slash_parent(self):
        assert join_remote_path("/home/admin/", "a b") == "/home/admin/a b"


class TestValidateServerId:
    """Test logical host id validation."""

    @pytest.mark.parametrize("server_id", ["vps-1", "vps-ssh-10", "mock-1"])
    def test_valid(self, server_id):
        assert validate_server_id(server_id) == server_id

    def test_strips_whitespace(self):
        assert validate_server_id("  vps-1 ") == "vps-1"

    @pytest.mark.parametrize("server_id", [None, "", "  "])
    def test_empty_rejected(self, server_id):
        with pytest.raises(ValueError, match="required"):
            validate_server_id(server_id)

    @pytest.mark.parametrize("server_id", ["vps;rm", "a/b", "$(id)", "vps 1", "x`y`"])
    def test_suspicious_rejected(self, server_id):
        with pytest.raises(ValueError, match="invalid characters"):
            validate_server_id(server_id)

    def test_too_long_rejected(self):
        with pytest.raises(ValueError, match="too long"):
            validate_server_id("v" * 129)
