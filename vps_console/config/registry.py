"""Host registry built from environment variables.

Two shapes are recognised and merged, in this order:

- a legacy single host: ``VPS_SSH_HOST``, ``VPS_SSH_PORT``, ``VPS_SSH_USER``,
  ``VPS_SSH_PASS``, ``VPS_SSH_KEY``, ``VPS_SSH_NAME`` -> id ``vps-1``
- a numbered pool: ``VPS_SSH_HOST_<n>`` ... ``VPS_SSH_NAME_<n>`` for
  ``n`` in ``1..MAX_NUMBERED_HOSTS`` -> id ``vps-ssh-<n>``
"""

import logging
import os
from collections.abc import Iterator, Mapping

from vps_console.errors import HostNotFoundError
from vps_console.models import HostCredential

logger = logging.getLogger(__name__)

ENV_PREFIX = "VPS_SSH"
LEGACY_HOST_ID = "vps-1"
MAX_NUMBERED_HOSTS = 10
DEFAULT_PORT = 22
DEFAULT_USER = "root"

_FIELDS = ("HOST", "PORT", "USER", "PASS", "KEY", "NAME")


class HostRegistry:
    """Read-only, ordered set of configured hosts keyed by logical id."""

    def __init__(self, hosts: list[HostCredential] | None = None) -> None:
        """Initialize registry.

        Args:
            hosts: Credentials in display order. Later duplicates of an id
                replace earlier ones.
        """
        self._hosts: dict[str, HostCredential] = {}
        for host in hosts or []:
            self._hosts[host.id] = host

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HostRegistry":
        """Scan the environment once for both configuration shapes.

        Args:
            environ: Mapping to scan (default: ``os.environ``)

        Returns:
            Registry holding every discovered entry
        """
        env = os.environ if environ is None else environ
        hosts: list[HostCredential] = []

        legacy = _read_entry(env, suffix="")
        if legacy is not None:
            hosts.append(
                _build_credential(LEGACY_HOST_ID, "Primary VPS", legacy)
            )

        for index in range(1, MAX_NUMBERED_HOSTS + 1):
            entry = _read_entry(env, suffix=f"_{index}")
            if entry is None:
                continue
            hosts.append(
                _build_credential(f"vps-ssh-{index}", f"VPS Server {index}", entry)
            )

        logger.info(
            "Loaded %d host(s) from environment: %s",
            len(hosts),
            ", ".join(h.id for h in hosts) if hosts else "(none)",
        )
        return cls(hosts)

    def resolve(self, server_id: str) -> HostCredential | None:
        """Look up a host by logical id.

        Returns:
            HostCredential if configured, None otherwise
        """
        return self._hosts.get(server_id)

    def require(self, server_id: str) -> HostCredential:
        """Look up a host by logical id, failing if absent.

        Raises:
            HostNotFoundError: If no host is configured under ``server_id``
        """
        host = self.resolve(server_id)
        if host is None:
            raise HostNotFoundError(server_id, self.ids)
        return host

    @property
    def ids(self) -> list[str]:
        return list(self._hosts)

    def all(self) -> list[HostCredential]:
        return list(self._hosts.values())

    def __contains__(self, server_id: object) -> bool:
        return server_id in self._hosts

    def __iter__(self) -> Iterator[HostCredential]:
        return iter(self._hosts.values())

    def __len__(self) -> int:
        return len(self._hosts)


def _read_entry(env: Mapping[str, str], suffix: str) -> dict[str, str] | None:
    """Collect the variables of one entry, or None if none of them is set."""
    entry = {
        field: env[f"{ENV_PREFIX}_{field}{suffix}"]
        for field in _FIELDS
        if f"{ENV_PREFIX}_{field}{suffix}" in env
    }
    return entry or None


def _build_credential(
    host_id: str,
    default_name: str,
    entry: dict[str, str],
) -> HostCredential:
    port_str = entry.get("PORT", "").strip()
    port = DEFAULT_PORT
    if port_str:
        try:
            port = int(port_str)
        except ValueError:
            logger.warning(
                "Invalid port for %s: %s, using default %d",
                host_id,
                port_str,
                DEFAULT_PORT,
            )

    return HostCredential(
        id=host_id,
        name=entry.get("NAME") or default_name,
        host=entry.get("HOST", "").strip(),
        port=port,
        username=entry.get("USER", DEFAULT_USER).strip(),
        password=entry.get("PASS") or None,
        private_key=entry.get("KEY") or None,
    )
