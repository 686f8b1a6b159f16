"""Entry point for the vps_console server."""

import logging

from vps_console.config import Settings
from vps_console.server import mcp  # importing also configures logging

logger = logging.getLogger(__name__)


def run_server() -> None:
    """Run the server with the configured transport."""
    settings = Settings.from_env()
    logger.info(
        "Logging configured: level=%s, transport=%s",
        settings.log_level,
        settings.transport,
    )

    if settings.transport == "stdio":
        logger.info("Starting VPS Console server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting VPS Console server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        mcp.run(
            transport="http",
            host=settings.http_host,
            port=settings.http_port,
        )


if __name__ == "__main__":
    run_server()
