"""Tests for HostKeyVerifier."""

from pathlib import Path

import pytest

from vps_console.config.host_keys import HostKeyVerifier


def test_verifier_uses_custom_path(tmp_path: Path) -> None:
    custom = tmp_path / "my_known_hosts"
    custom.touch()

    verifier = HostKeyVerifier(known_hosts_path=str(custom))
    assert verifier.get_known_hosts_path() == str(custom)
    assert verifier.is_enabled()


@pytest.mark.parametrize("value", ["none", "NONE"])
def test_verifier_disabled_with_none(value: str) -> None:
    verifier = HostKeyVerifier(known_hosts_path=value)
    assert verifier.get_known_hosts_path() is None
    assert not verifier.is_enabled()


def test_missing_file_disables_verification(tmp_path: Path) -> None:
    """Non-strict mode warns and carries on without verification."""
    verifier = HostKeyVerifier(known_hosts_path=str(tmp_path / "missing"))
    assert verifier.get_known_hosts_path() is None


def test_missing_file_strict_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="known_hosts"):
        HostKeyVerifier(
            known_hosts_path=str(tmp_path / "missing"),
            strict_checking=True,
        )


def test_default_path_under_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    known_hosts = tmp_path / ".ssh" / "known_hosts"
    known_hosts.parent.mkdir()
    known_hosts.touch()

    assert HostKeyVerifier().get_known_hosts_path() == str(known_hosts)
