"""Tests for Settings and the Config aggregate."""

from pathlib import Path

import pytest

from vps_console.config import Config, HostRegistry, Settings

SETTINGS_VARS = (
    "VPS_CONSOLE_CLIENT",
    "VPS_CONSOLE_MAX_FILE_SIZE",
    "VPS_CONSOLE_COMMAND_TIMEOUT",
    "VPS_CONSOLE_CONNECT_TIMEOUT",
    "VPS_CONSOLE_TRANSPORT",
    "VPS_CONSOLE_HTTP_HOST",
    "VPS_CONSOLE_HTTP_PORT",
    "VPS_CONSOLE_LOG_LEVEL",
    "VPS_CONSOLE_LOG_COLORS",
    "VPS_CONSOLE_LOG_PAYLOADS",
    "VPS_CONSOLE_SLOW_THRESHOLD_MS",
    "VPS_CONSOLE_INCLUDE_TRACEBACK",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in SETTINGS_VARS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings.client == "mock"
    assert settings.max_file_size == 1_048_576
    assert settings.command_timeout == 30
    assert settings.connect_timeout == 10
    assert settings.transport == "http"
    assert settings.http_port == 8000
    assert settings.log_payloads is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VPS_CONSOLE_CLIENT", "SSH")
    monkeypatch.setenv("VPS_CONSOLE_MAX_FILE_SIZE", "4096")
    monkeypatch.setenv("VPS_CONSOLE_TRANSPORT", "stdio")
    monkeypatch.setenv("VPS_CONSOLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("VPS_CONSOLE_INCLUDE_TRACEBACK", "yes")

    settings = Settings.from_env()

    assert settings.client == "ssh"
    assert settings.max_file_size == 4096
    assert settings.transport == "stdio"
    assert settings.log_level == "DEBUG"
    assert settings.include_traceback is True


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_invalid_int_uses_default(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("VPS_CONSOLE_COMMAND_TIMEOUT", value)
    assert Settings.from_env().command_timeout == 30


def test_unknown_client_falls_back_to_mock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VPS_CONSOLE_CLIENT", "telnet")
    assert Settings.from_env().client == "mock"


def test_config_scans_hosts_lazily(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VPS_SSH_HOST", "legacy.example.com")
    monkeypatch.setenv("VPS_CONSOLE_KNOWN_HOSTS", "none")

    config = Config.from_env()

    assert config.known_hosts_path is None
    assert "vps-1" in config.registry
    assert config.registry is config.registry


def test_config_known_hosts_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    known_hosts = tmp_path / "known_hosts"
    known_hosts.touch()
    monkeypatch.setenv("VPS_CONSOLE_KNOWN_HOSTS", str(known_hosts))

    assert Config.from_env().known_hosts_path == str(known_hosts)


def test_config_for_hosts() -> None:
    registry = HostRegistry()
    config = Config.for_hosts(registry)

    assert config.registry is registry
    assert config.client == "mock"
    assert config.known_hosts_path is None
