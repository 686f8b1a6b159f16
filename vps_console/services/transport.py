"""Connect-per-call SSH transport.

Every call opens a fresh authenticated connection, runs exactly one command
and closes the connection again, whatever the outcome. There is no pooling
and no keep-alive: the caller pays one handshake per call in exchange for
holding no session state between requests.
"""

import asyncio
import logging
import time
from typing import Any

import asyncssh

from vps_console.errors import (
    CommandTimeoutError,
    ConfigurationError,
    RemoteCommandError,
    TransportError,
)
from vps_console.models import HostCredential

logger = logging.getLogger(__name__)

PEM_MARKER = "-----BEGIN"


def _to_text(data: Any) -> str:
    """Normalize asyncssh output (str, bytes or None) to text."""
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return str(data)


class SSHTransport:
    """Runs single commands over short-lived asyncssh connections."""

    def __init__(
        self,
        command_timeout: float = 30,
        connect_timeout: float = 10,
        known_hosts: str | None = None,
    ) -> None:
        """Initialize transport.

        Args:
            command_timeout: Seconds a remote command may run before the
                session is aborted
            connect_timeout: Seconds allowed for connect and authentication
            known_hosts: Path to known_hosts file, or None to disable
                host key verification
        """
        self.command_timeout = command_timeout
        self.connect_timeout = connect_timeout
        self._known_hosts = known_hosts

        if self._known_hosts is None:
            logger.warning(
                "SSH host key verification DISABLED - vulnerable to MITM attacks. "
                "Set VPS_CONSOLE_KNOWN_HOSTS to a valid known_hosts file path."
            )

    def _client_keys(self, credential: HostCredential) -> list[Any] | None:
        """Private key from config: inline PEM text or a key file path."""
        if not credential.private_key:
            return None
        if credential.private_key.lstrip().startswith(PEM_MARKER):
            return [asyncssh.import_private_key(credential.private_key)]
        return [credential.private_key]

    def _connect(self, credential: HostCredential) -> Any:
        return asyncssh.connect(
            credential.host,
            port=credential.port,
            username=credential.username,
            password=credential.password,
            client_keys=self._client_keys(credential),
            known_hosts=self._known_hosts,
            connect_timeout=self.connect_timeout,
        )

    async def run(
        self,
        credential: HostCredential,
        command: str,
        *,
        check: bool = False,
    ) -> str:
        """Run one command and return stdout and stderr as a single blob.

        Args:
            credential: Host to connect to
            command: Shell command string
            check: Raise RemoteCommandError on non-zero exit status

        Returns:
            Combined output in arrival order

        Raises:
            ConfigurationError: If host or username is missing
            CommandTimeoutError: If the command exceeds ``command_timeout``
            TransportError: If connect, auth or the session fails
            RemoteCommandError: If ``check`` is set and the exit status is
                non-zero
        """
        credential.validate()
        start = time.perf_counter()

        logger.info(
            "Opening SSH connection to %s (%s)",
            credential.id,
            credential.address,
        )

        try:
            async with self._connect(credential) as conn:
                result = await conn.run(
                    command,
                    check=check,
                    stderr=asyncssh.STDOUT,
                    timeout=self.command_timeout,
                    encoding="utf-8",
                    errors="replace",
                )
        except asyncssh.KeyImportError as e:
            raise ConfigurationError(
                f"Invalid private key configured for {credential.id}: {e}"
            ) from e
        except asyncssh.TimeoutError as e:
            logger.warning(
                "Command on %s timed out after %ss",
                credential.id,
                self.command_timeout,
            )
            raise CommandTimeoutError(credential.id, self.command_timeout, e) from e
        except asyncssh.ProcessError as e:
            raise RemoteCommandError(command, e.exit_status, _to_text(e.stdout)) from e
        except (asyncssh.Error, OSError, asyncio.TimeoutError) as e:
            logger.error(
                "SSH call to %s failed: %s: %s",
                credential.id,
                type(e).__name__,
                e,
            )
            raise TransportError(credential.id, e) from e

        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "SSH connection to %s closed (exit_status=%s, %.1fms)",
            credential.id,
            result.exit_status,
            duration_ms,
        )
        return _to_text(result.stdout)
