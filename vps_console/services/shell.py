"""Persistent-shell emulation over a connect-per-call transport.

The transport forgets everything between calls, so the working directory is
carried in the command text itself. Each call sends one composite command::

    cd "<cwd>" 2>/dev/null || cd /; <command>; echo "<SENTINEL>"; pwd

and the captured blob is split on the sentinel: what precedes it is the
command output, what follows is the remote ``pwd``. A directory that no
longer exists drops the session back to ``/`` instead of failing.
"""

import logging

from vps_console.models import ExecutionRequest, ExecutionResult, HostCredential
from vps_console.protocols import CommandTransport
from vps_console.utils.shell import double_quote
from vps_console.utils.validation import normalize_remote_path

logger = logging.getLogger(__name__)

SENTINEL = "___CWD_SEPARATOR___"


def build_command(cwd: str, command: str) -> str:
    """Compose the single remote command for one terminal call.

    The working directory is double-quoted with its special characters
    escaped; the user command is passed through with trailing whitespace
    removed, since a trailing newline would split the composite command.

    Args:
        cwd: Absolute working directory to start in
        command: Command text typed by the user

    Returns:
        Composite shell command string
    """
    return (
        f"cd {double_quote(cwd)} 2>/dev/null || cd /; "
        f'{command.rstrip()}; echo "{SENTINEL}"; pwd'
    )


def split_output(raw: str, cwd: str) -> ExecutionResult:
    """Recover command output and the new working directory from one blob.

    Splits on the last sentinel, so command output that happens to contain
    the sentinel stays in the output. The new working directory is the last
    non-empty line after it and must be absolute. When the sentinel is
    missing (killed command) or the tail is not a ``pwd`` report (bash echoes
    the whole command line in a syntax error) the blob is returned as output
    and ``cwd`` is kept.

    Args:
        raw: Captured remote output
        cwd: Working directory the command was issued from

    Returns:
        ExecutionResult for the call
    """
    output, found, tail = raw.rpartition(SENTINEL)
    if not found:
        logger.warning(
            "Protocol desync: sentinel missing from %d chars of output, keeping cwd %s",
            len(raw),
            cwd,
        )
        return ExecutionResult(output=raw.strip(), cwd=cwd)

    lines = [line.strip() for line in tail.splitlines() if line.strip()]
    if not lines:
        return ExecutionResult(output=output.strip(), cwd=cwd)

    new_cwd = lines[-1]
    if not new_cwd.startswith("/"):
        logger.warning(
            "Protocol desync: %r after sentinel is not a directory, keeping cwd %s",
            new_cwd,
            cwd,
        )
        return ExecutionResult(output=raw.strip(), cwd=cwd)
    return ExecutionResult(output=output.strip(), cwd=new_cwd)


class ShellEmulator:
    """Runs terminal commands as if in a long-lived shell session.

    Holds no per-session state: the caller feeds each result's ``cwd`` into
    its next request.
    """

    def __init__(self, transport: CommandTransport) -> None:
        self.transport = transport

    async def execute(
        self,
        credential: HostCredential,
        request: ExecutionRequest,
    ) -> ExecutionResult:
        """Run one command in the request's working directory.

        Blank commands return immediately without contacting the host.

        Raises:
            ConfigurationError: If the credential is incomplete
            TransportError: If the host cannot be reached
        """
        cwd = normalize_remote_path(request.cwd)

        if not request.command.strip():
            return ExecutionResult(output="", cwd=cwd)

        logger.debug("Executing on %s in %s: %s", credential.id, cwd, request.command)
        raw = await self.transport.run(credential, build_command(cwd, request.command))
        return split_output(raw, cwd)
