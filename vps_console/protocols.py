"""Protocol interfaces for dependency inversion.

Defines the seams between the server surface, the remote client and the
SSH transport, so each can be swapped for an in-memory fake.

Usage Example:

    from vps_console.protocols import CommandTransport

    class RecordingTransport:
        def __init__(self, blob: str) -> None:
            self.blob = blob
            self.commands: list[str] = []

        async def run(self, credential, command, *, check=False) -> str:
            self.commands.append(command)
            return self.blob

    emulator = ShellEmulator(RecordingTransport("out\\n___CWD_SEPARATOR___\\n/tmp"))
"""

from typing import Protocol, runtime_checkable

from vps_console.models import (
    DirectoryListing,
    ExecutionResult,
    FileContent,
    HostCredential,
)


@runtime_checkable
class CommandTransport(Protocol):
    """Single-shot connect / execute / disconnect primitive."""

    async def run(
        self,
        credential: HostCredential,
        command: str,
        *,
        check: bool = False,
    ) -> str:
        """Run one command on the host and return its combined output.

        Args:
            credential: Host to connect to
            command: Shell command string
            check: Raise on non-zero exit status

        Returns:
            stdout and stderr interleaved in arrival order

        Raises:
            ConfigurationError: If the credential is incomplete
            TransportError: If the host cannot be reached or the call times out
            RemoteCommandError: If ``check`` is set and the command failed
        """
        ...


@runtime_checkable
class RemoteHostClient(Protocol):
    """Command/query contract consumed by the dashboard."""

    async def execute(self, server_id: str, command: str, cwd: str) -> ExecutionResult:
        """Run a terminal command in a logical working directory.

        Raises:
            ConfigurationError: Unknown or incomplete host
            TransportError: Host unreachable or call timed out
        """
        ...

    async def list_directory(self, server_id: str, path: str) -> DirectoryListing:
        """List a directory; remote failures are reported in the result.

        Raises:
            ConfigurationError: Unknown or incomplete host
        """
        ...

    async def read_file(self, server_id: str, path: str) -> FileContent:
        """Fetch bounded file content.

        Raises:
            ConfigurationError: Unknown or incomplete host
            TransportError: Host unreachable or call timed out
            FileReadError: The remote read failed
        """
        ...

    def list_hosts(self) -> list[HostCredential]:
        """Configured hosts in registry order."""
        ...


__all__ = [
    "CommandTransport",
    "RemoteHostClient",
]
