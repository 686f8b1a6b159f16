"""SSH host key verification.

Resolves which known_hosts file, if any, the transport verifies against.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class HostKeyVerifier:
    """SSH host key verification policy."""

    def __init__(
        self,
        known_hosts_path: str | None = None,
        strict_checking: bool = False,
    ):
        """Initialize host key verifier.

        Args:
            known_hosts_path: Path to known_hosts file or 'none' to disable
            strict_checking: Fail at startup when the known_hosts file is
                missing instead of falling back to no verification

        Raises:
            FileNotFoundError: If strict mode and file missing
        """
        self.strict_checking = strict_checking
        self._known_hosts = self._resolve_known_hosts(known_hosts_path)

    def _resolve_known_hosts(self, env_value: str | None) -> str | None:
        """Resolve known_hosts path.

        Returns:
            Path to known_hosts file or None to disable verification

        Raises:
            FileNotFoundError: If strict mode and file missing
        """
        if env_value and env_value.lower() == "none":
            logger.warning(
                "SSH host key verification disabled (VPS_CONSOLE_KNOWN_HOSTS=none)"
            )
            return None

        if env_value:
            path = Path(os.path.expanduser(env_value))
        else:
            path = Path.home() / ".ssh" / "known_hosts"

        if path.exists():
            return str(path)

        if self.strict_checking:
            raise FileNotFoundError(
                f"SSH host key verification required but known_hosts not "
                f"found at {path}.\n\n"
                f"To fix this:\n"
                f"1. Add host keys: ssh-keyscan <hostname> >> {path}\n"
                f"2. Or point VPS_CONSOLE_KNOWN_HOSTS at an existing file\n"
                f"3. Or set VPS_CONSOLE_STRICT_HOST_KEY_CHECKING=false"
            )

        logger.warning(
            "known_hosts not found at %s, host key verification disabled",
            path,
        )
        return None

    def get_known_hosts_path(self) -> str | None:
        """Path to known_hosts file, or None if verification is disabled."""
        return self._known_hosts

    def is_enabled(self) -> bool:
        return self._known_hosts is not None
