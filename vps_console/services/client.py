"""Live remote host client backed by the SSH transport."""

import logging
from typing import TYPE_CHECKING

from vps_console.config.registry import HostRegistry
from vps_console.models import (
    DirectoryListing,
    ExecutionRequest,
    ExecutionResult,
    FileContent,
    HostCredential,
)
from vps_console.protocols import CommandTransport
from vps_console.services.content import DEFAULT_MAX_SIZE, read_file
from vps_console.services.listing import list_directory
from vps_console.services.shell import ShellEmulator
from vps_console.services.transport import SSHTransport

if TYPE_CHECKING:
    from vps_console.config import Config

logger = logging.getLogger(__name__)


class SSHHostClient:
    """Terminal, file browser and file viewer over connect-per-call SSH."""

    def __init__(
        self,
        registry: HostRegistry,
        transport: CommandTransport,
        max_file_size: int = DEFAULT_MAX_SIZE,
    ) -> None:
        self.registry = registry
        self.transport = transport
        self.max_file_size = max_file_size
        self.shell = ShellEmulator(transport)

    @classmethod
    def from_config(cls, config: "Config") -> "SSHHostClient":
        """Build the client and its transport from configuration."""
        transport = SSHTransport(
            command_timeout=config.command_timeout,
            connect_timeout=config.connect_timeout,
            known_hosts=config.known_hosts_path,
        )
        return cls(
            registry=config.registry,
            transport=transport,
            max_file_size=config.max_file_size,
        )

    def _credential(self, server_id: str) -> HostCredential:
        """Resolve and validate the credential for a logical host.

        Raises:
            HostNotFoundError: Unknown id
            ConfigurationError: Host or username missing
        """
        return self.registry.require(server_id).validate()

    async def execute(self, server_id: str, command: str, cwd: str) -> ExecutionResult:
        credential = self._credential(server_id)
        request = ExecutionRequest(server_id=server_id, command=command, cwd=cwd)
        return await self.shell.execute(credential, request)

    async def list_directory(self, server_id: str, path: str) -> DirectoryListing:
        credential = self._credential(server_id)
        return await list_directory(self.transport, credential, path)

    async def read_file(self, server_id: str, path: str) -> FileContent:
        credential = self._credential(server_id)
        return await read_file(self.transport, credential, path, self.max_file_size)

    def list_hosts(self) -> list[HostCredential]:
        return self.registry.all()
