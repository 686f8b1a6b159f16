"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

CLIENT_MODES = ("ssh", "mock")
TRANSPORTS = ("http", "stdio")


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Remote client
    client: str = field(default="mock")
    max_file_size: int = field(default=1_048_576)  # 1MB
    command_timeout: int = field(default=30)
    connect_timeout: int = field(default=10)

    # Transport
    transport: str = field(default="http")
    http_host: str = field(default="0.0.0.0")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from VPS_CONSOLE_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            client=cls._get_choice("VPS_CONSOLE_CLIENT", CLIENT_MODES, "mock"),
            max_file_size=cls._get_int("VPS_CONSOLE_MAX_FILE_SIZE", 1_048_576),
            command_timeout=cls._get_int("VPS_CONSOLE_COMMAND_TIMEOUT", 30),
            connect_timeout=cls._get_int("VPS_CONSOLE_CONNECT_TIMEOUT", 10),
            transport=cls._get_choice("VPS_CONSOLE_TRANSPORT", TRANSPORTS, "http"),
            http_host=os.getenv("VPS_CONSOLE_HTTP_HOST", "0.0.0.0"),
            http_port=cls._get_int("VPS_CONSOLE_HTTP_PORT", 8000),
            log_level=os.getenv("VPS_CONSOLE_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("VPS_CONSOLE_LOG_COLORS", True),
            log_payloads=cls._get_bool("VPS_CONSOLE_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("VPS_CONSOLE_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("VPS_CONSOLE_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get a positive integer from environment.

        Args:
            key: Environment variable key
            default: Default value if unset or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

        if parsed <= 0:
            logger.warning("Non-positive %s: %d, using default %d", key, parsed, default)
            return default
        return parsed

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_choice(key: str, choices: tuple[str, ...], default: str) -> str:
        """Get one of a fixed set of values, falling back to default."""
        value = os.getenv(key, "").strip().lower()
        if value in choices:
            return value
        if value:
            logger.warning(
                "Invalid value for %s: %s (expected one of %s), using %s",
                key,
                value,
                ", ".join(choices),
                default,
            )
        return default
