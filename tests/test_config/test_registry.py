"""Tests for the environment-driven host registry."""

from unittest.mock import patch

import pytest

from vps_console.config import HostRegistry
from vps_console.errors import ConfigurationError, HostNotFoundError


@pytest.fixture
def environ() -> dict[str, str]:
    """Legacy host plus numbered hosts 1, 2 and 5."""
    return {
        "VPS_SSH_HOST": "legacy.example.com",
        "VPS_SSH_USER": "admin",
        "VPS_SSH_PASS": "legacy-pass",
        "VPS_SSH_HOST_1": "10.0.0.1",
        "VPS_SSH_PORT_1": "2201",
        "VPS_SSH_HOST_2": "10.0.0.2",
        "VPS_SSH_USER_2": "deploy",
        "VPS_SSH_KEY_2": "/home/deploy/.ssh/id_ed25519",
        "VPS_SSH_NAME_2": "Staging",
        "VPS_SSH_HOST_5": "10.0.0.5",
        "UNRELATED": "value",
    }


def test_discovers_legacy_and_numbered_hosts(environ: dict[str, str]) -> None:
    registry = HostRegistry.from_env(environ)

    assert registry.ids == ["vps-1", "vps-ssh-1", "vps-ssh-2", "vps-ssh-5"]
    assert len(registry) == 4


def test_resolve_builds_credentials(environ: dict[str, str]) -> None:
    registry = HostRegistry.from_env(environ)

    legacy = registry.resolve("vps-1")
    assert legacy is not None
    assert legacy.host == "legacy.example.com"
    assert legacy.username == "admin"
    assert legacy.password == "legacy-pass"
    assert legacy.name == "Primary VPS"

    first = registry.resolve("vps-ssh-1")
    assert first is not None
    assert first.port == 2201
    assert first.username == "root"
    assert first.name == "VPS Server 1"

    second = registry.resolve("vps-ssh-2")
    assert second is not None
    assert second.private_key == "/home/deploy/.ssh/id_ed25519"
    assert second.password is None
    assert second.name == "Staging"


def test_resolve_unknown_returns_none(environ: dict[str, str]) -> None:
    registry = HostRegistry.from_env(environ)
    assert registry.resolve("vps-ssh-3") is None
    assert "vps-ssh-3" not in registry


def test_require_unknown_raises(environ: dict[str, str]) -> None:
    registry = HostRegistry.from_env(environ)

    with pytest.raises(HostNotFoundError) as exc_info:
        registry.require("vps-ssh-9")

    assert exc_info.value.server_id == "vps-ssh-9"
    assert "vps-1" in exc_info.value.available


def test_empty_environment() -> None:
    registry = HostRegistry.from_env({})
    assert len(registry) == 0
    assert registry.all() == []


def test_hosts_beyond_limit_are_ignored() -> None:
    registry = HostRegistry.from_env({"VPS_SSH_HOST_11": "10.0.0.11"})
    assert len(registry) == 0


def test_invalid_port_falls_back_to_default() -> None:
    with patch("vps_console.config.registry.logger") as mock_logger:
        registry = HostRegistry.from_env(
            {"VPS_SSH_HOST_1": "10.0.0.1", "VPS_SSH_PORT_1": "ssh"}
        )

    host = registry.require("vps-ssh-1")
    assert host.port == 22
    assert "Invalid port" in mock_logger.warning.call_args[0][0]


def test_entry_without_host_fails_at_use() -> None:
    """A partially configured entry is registered but refuses to connect."""
    registry = HostRegistry.from_env({"VPS_SSH_USER_3": "deploy"})

    host = registry.require("vps-ssh-3")
    assert host.host == ""
    with pytest.raises(ConfigurationError, match="vps-ssh-3"):
        host.validate()


def test_iteration_preserves_order(environ: dict[str, str]) -> None:
    registry = HostRegistry.from_env(environ)
    assert [h.id for h in registry] == registry.ids
