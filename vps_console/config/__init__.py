"""Configuration module for VPS Console.

Provides focused classes for different configuration concerns:
- Config: Main configuration snapshot (aggregates all components)
- HostRegistry: Host pool from VPS_SSH_* variables
- HostKeyVerifier: SSH host key verification policy
- Settings: VPS_CONSOLE_* environment configuration
"""

from vps_console.config.host_keys import HostKeyVerifier
from vps_console.config.main import Config
from vps_console.config.registry import LEGACY_HOST_ID, MAX_NUMBERED_HOSTS, HostRegistry
from vps_console.config.settings import Settings

__all__ = [
    "Config",
    "HostKeyVerifier",
    "HostRegistry",
    "LEGACY_HOST_ID",
    "MAX_NUMBERED_HOSTS",
    "Settings",
]
