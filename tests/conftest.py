"""Shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from vps_console.config import Config, HostRegistry
from vps_console.dependencies import Dependencies
from vps_console.models import HostCredential
from vps_console.services import MockHostClient


@pytest.fixture
def credential() -> HostCredential:
    """A complete password credential."""
    return HostCredential(
        id="vps-1",
        name="Primary VPS",
        host="203.0.113.10",
        port=2222,
        username="deploy",
        password="s3cret",
    )


@pytest.fixture
def registry(credential: HostCredential) -> HostRegistry:
    return HostRegistry([credential])


@pytest.fixture
def transport() -> MagicMock:
    """Command transport whose ``run`` is an AsyncMock."""
    mock = MagicMock()
    mock.run = AsyncMock(return_value="")
    return mock


@pytest.fixture
def mock_deps() -> Dependencies:
    """Dependencies wired to the in-memory client, no hosts configured."""
    config = Config.for_hosts(HostRegistry())
    return Dependencies(config=config, client=MockHostClient())
