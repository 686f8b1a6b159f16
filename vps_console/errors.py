"""Exception hierarchy for VPS Console."""


class RemoteConsoleError(Exception):
    """Base class for errors surfaced to callers."""


class ConfigurationError(RemoteConsoleError):
    """A host is not configured, or is missing mandatory fields."""


class HostNotFoundError(ConfigurationError):
    """No host is registered under the requested id."""

    def __init__(self, server_id: str, available: list[str] | None = None):
        """Initialize host-not-found error.

        Args:
            server_id: Requested logical host id
            available: Ids that are configured, for the message
        """
        self.server_id = server_id
        self.available = available or []
        message = f"Unknown server '{server_id}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class TransportError(RemoteConsoleError):
    """Could not reach the host, authenticate, or keep the session alive."""

    def __init__(self, host_id: str, original_error: Exception):
        """Initialize transport error.

        Args:
            host_id: Logical id of the host
            original_error: Exception raised by the SSH layer
        """
        self.host_id = host_id
        self.original_error = original_error
        super().__init__(f"Cannot reach {host_id}: {original_error}")


class CommandTimeoutError(TransportError):
    """The remote command did not finish before the deadline."""

    def __init__(self, host_id: str, timeout: float, original_error: Exception):
        self.timeout = timeout
        super().__init__(host_id, original_error)
        self.args = (f"Command on {host_id} timed out after {timeout:g}s",)


class RemoteCommandError(RemoteConsoleError):
    """A checked remote command exited with a non-zero status."""

    def __init__(self, command: str, exit_status: int | None, output: str):
        self.command = command
        self.exit_status = exit_status
        self.output = output
        detail = output.strip() or "no output"
        super().__init__(f"Remote command exited with status {exit_status}: {detail}")


class FileReadError(RemoteConsoleError):
    """A remote file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")
