"""Dependency injection container for VPS Console.

Built once at process start and passed explicitly to tools and routes.
"""

import logging
from dataclasses import dataclass

from vps_console.config import Config
from vps_console.protocols import RemoteHostClient
from vps_console.services import MockHostClient, SSHHostClient

logger = logging.getLogger(__name__)


def create_client(config: Config) -> RemoteHostClient:
    """Select the remote client variant named by configuration.

    Args:
        config: Configuration snapshot

    Returns:
        SSHHostClient for ``ssh``, MockHostClient otherwise
    """
    if config.client == "ssh":
        logger.info("Using SSH remote client (%d host(s))", len(config.registry))
        return SSHHostClient.from_config(config)

    logger.info("Using mock remote client")
    return MockHostClient(registry=config.registry, max_file_size=config.max_file_size)


@dataclass
class Dependencies:
    """Container for VPS Console dependencies.

    Example:
        deps = Dependencies.create()
        result = await deps.client.execute("vps-1", "ls", "/")
    """

    config: Config
    client: RemoteHostClient

    @classmethod
    def create(cls) -> "Dependencies":
        """Create dependencies from the process environment."""
        return cls.from_config(Config.from_env())

    @classmethod
    def from_config(cls, config: Config) -> "Dependencies":
        """Create dependencies with a custom configuration."""
        return cls(config=config, client=create_client(config))
