"""Host credential data models."""

from dataclasses import dataclass

from vps_console.errors import ConfigurationError


@dataclass(frozen=True)
class HostCredential:
    """Connection parameters for one configured remote host.

    Entries are loaded from the environment without validation; an entry
    missing its host or username only fails when it is used.
    """

    id: str
    name: str
    host: str
    port: int = 22
    username: str = "root"
    password: str | None = None
    private_key: str | None = None

    def validate(self) -> "HostCredential":
        """Ensure the mandatory connection fields are present.

        Returns:
            The same credential, for chaining.

        Raises:
            ConfigurationError: If host or username is missing.
        """
        if not self.host or not self.username:
            raise ConfigurationError(f"SSH credentials not configured for {self.id}")
        return self

    @property
    def address(self) -> str:
        """user@host:port, for logs."""
        return f"{self.username}@{self.host}:{self.port}"

    def to_public_dict(self) -> dict[str, str | int]:
        """Serialize without secrets."""
        return {
            "id": self.id,
            "name": self.name,
            "host": self.host,
            "port": self.port,
            "username": self.username,
        }

    def __repr__(self) -> str:
        return (
            f"HostCredential(id={self.id!r}, name={self.name!r}, "
            f"address={self.address!r})"
        )
