"""Tests for server wiring: tools, middleware and lifespan."""

import json
from unittest.mock import patch

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from vps_console.config import Config, HostRegistry
from vps_console.dependencies import Dependencies
from vps_console.models import HostCredential
from vps_console.server import create_server
from vps_console.services import MockHostClient


def _text(result) -> str:
    return "".join(getattr(block, "text", "") for block in result.content)


@pytest.mark.asyncio
async def test_tools_registered(mock_deps: Dependencies) -> None:
    server = create_server(mock_deps)

    async with Client(server) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == {
        "execute",
        "list_directory",
        "read_file",
        "list_hosts",
    }


@pytest.mark.asyncio
async def test_execute_tool_round_trip(mock_deps: Dependencies) -> None:
    server = create_server(mock_deps)

    async with Client(server) as client:
        result = await client.call_tool(
            "execute", {"server_id": "mock-1", "command": "cd /var/log", "cwd": "/"}
        )

    assert json.loads(_text(result)) == {"output": "", "cwd": "/var/log"}


@pytest.mark.asyncio
async def test_unknown_server_surfaces_as_tool_error(
    credential: HostCredential,
) -> None:
    registry = HostRegistry([credential])
    deps = Dependencies(
        config=Config.for_hosts(registry),
        client=MockHostClient(registry=registry),
    )
    server = create_server(deps)

    async with Client(server) as client:
        with pytest.raises(ToolError, match="Unknown server 'vps-ssh-8'"):
            await client.call_tool(
                "execute", {"server_id": "vps-ssh-8", "command": "ls"}
            )


@pytest.mark.asyncio
async def test_list_hosts_tool(mock_deps: Dependencies) -> None:
    server = create_server(mock_deps)

    async with Client(server) as client:
        result = await client.call_tool("list_hosts", {"check_online": False})

    assert "mock-1" in _text(result)


def test_create_server_defaults_to_environment() -> None:
    with patch("vps_console.server.Dependencies.create") as mock_create:
        mock_create.return_value = Dependencies(
            config=Config.for_hosts(HostRegistry()), client=MockHostClient()
        )
        server = create_server()

    mock_create.assert_called_once_with()
    assert server.name == "vps_console"
