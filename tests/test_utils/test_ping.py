"""Tests for host reachability probes."""

import asyncio
import time
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vps_console.models import HostCredential
from vps_console.utils.ping import is_port_open, probe_hosts


def _writer() -> MagicMock:
    writer = MagicMock()
    writer.close = MagicMock()
    writer.wait_closed = AsyncMock()
    return writer


def _host(n: int, host: str | None = None) -> HostCredential:
    return HostCredential(
        id=f"vps-ssh-{n}",
        name=f"VPS Server {n}",
        host=f"10.0.0.{n}" if host is None else host,
    )


@pytest.mark.asyncio
async def test_port_open() -> None:
    writer = _writer()
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.return_value = (MagicMock(), writer)

        assert await is_port_open("192.168.1.1", 22) is True

    mock_conn.assert_awaited_once_with("192.168.1.1", 22)
    writer.close.assert_called_once()


@pytest.mark.asyncio
async def test_port_closed() -> None:
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.side_effect = OSError("Connection refused")

        assert await is_port_open("192.168.1.1", 22) is False


@pytest.mark.asyncio
async def test_reset_during_close_counts_as_offline() -> None:
    writer = _writer()
    writer.wait_closed.side_effect = ConnectionResetError("reset by peer")
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.return_value = (MagicMock(), writer)

        assert await is_port_open("192.168.1.1", 22) is False


@pytest.mark.asyncio
async def test_probe_hosts_survives_reset_during_close() -> None:
    async def fake_open_connection(host: str, port: int) -> tuple:
        writer = _writer()
        if host == "10.0.0.2":
            writer.wait_closed.side_effect = ConnectionResetError()
        return (MagicMock(), writer)

    with patch("asyncio.open_connection", side_effect=fake_open_connection):
        results = await probe_hosts([_host(1), _host(2)])

    assert results == {"vps-ssh-1": True, "vps-ssh-2": False}


@pytest.mark.asyncio
async def test_blank_hostname_is_not_probed() -> None:
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        assert await is_port_open("", 22) is False
    mock_conn.assert_not_called()


@pytest.mark.asyncio
async def test_probe_hosts_mixed() -> None:
    async def fake_open_connection(host: str, port: int) -> tuple:
        if host == "10.0.0.1":
            return (MagicMock(), _writer())
        raise TimeoutError()

    with patch("asyncio.open_connection", side_effect=fake_open_connection):
        results = await probe_hosts([_host(1), _host(2), _host(3, host="")])

    assert results == {"vps-ssh-1": True, "vps-ssh-2": False, "vps-ssh-3": False}


@pytest.mark.asyncio
async def test_probe_hosts_runs_concurrently() -> None:
    delay_per_host = 0.1

    async def slow_open_connection(host: str, port: int) -> tuple:
        await asyncio.sleep(delay_per_host)
        return (MagicMock(), _writer())

    with patch("asyncio.open_connection", side_effect=slow_open_connection):
        start = time.perf_counter()
        results = await probe_hosts([_host(i) for i in range(1, 4)])
        elapsed = time.perf_counter() - start

    assert elapsed < delay_per_host * 2
    assert all(results.values())


@pytest.mark.asyncio
async def test_probe_no_hosts() -> None:
    assert await probe_hosts([]) == {}
