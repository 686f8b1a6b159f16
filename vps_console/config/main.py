"""Application configuration.

Delegates to specialized components:
- HostRegistry: VPS_SSH_* host pool
- HostKeyVerifier: known_hosts policy
- Settings: VPS_CONSOLE_* environment variables
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from vps_console.config.host_keys import HostKeyVerifier
from vps_console.config.registry import HostRegistry
from vps_console.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Read-only configuration snapshot.

    Built once at startup and handed to whichever component needs it.
    The host registry is scanned lazily on first use and then cached.
    """

    settings: Settings
    host_keys: HostKeyVerifier
    environ: Mapping[str, str] = field(default_factory=dict, repr=False)
    _registry: HostRegistry | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from the process environment.

        Returns:
            Configured instance with all components initialized
        """
        host_keys = HostKeyVerifier(
            known_hosts_path=os.getenv("VPS_CONSOLE_KNOWN_HOSTS"),
            strict_checking=Settings._get_bool(
                "VPS_CONSOLE_STRICT_HOST_KEY_CHECKING", False
            ),
        )
        return cls(
            settings=Settings.from_env(),
            host_keys=host_keys,
            environ=dict(os.environ),
        )

    @classmethod
    def for_hosts(
        cls,
        registry: HostRegistry,
        settings: Settings | None = None,
    ) -> "Config":
        """Create config around an already-built registry.

        Host key verification is disabled; intended for tests and
        embedding.
        """
        config = cls(
            settings=settings or Settings(),
            host_keys=HostKeyVerifier(known_hosts_path="none"),
        )
        config._registry = registry
        return config

    @property
    def registry(self) -> HostRegistry:
        """Host registry, scanned from the environment on first access."""
        if self._registry is None:
            self._registry = HostRegistry.from_env(self.environ)
        return self._registry

    # Delegate to settings for convenience
    @property
    def client(self) -> str:
        """Remote client variant ("ssh" or "mock")."""
        return self.settings.client

    @property
    def max_file_size(self) -> int:
        """Maximum bytes read from a text file."""
        return self.settings.max_file_size

    @property
    def command_timeout(self) -> int:
        """Per-call deadline in seconds."""
        return self.settings.command_timeout

    @property
    def connect_timeout(self) -> int:
        """SSH connect/auth deadline in seconds."""
        return self.settings.connect_timeout

    @property
    def transport(self) -> str:
        """Server transport (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        return self.settings.http_port

    @property
    def known_hosts_path(self) -> str | None:
        """Path to known_hosts file or None if disabled."""
        return self.host_keys.get_known_hosts_path()
