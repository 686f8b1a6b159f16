"""TCP reachability probes behind the host list's online flag."""

import asyncio
import logging
from collections.abc import Sequence

from vps_console.models import HostCredential

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 2.0


async def is_port_open(hostname: str, port: int, timeout: float = PROBE_TIMEOUT) -> bool:
    """Whether ``hostname`` accepts a TCP connection on ``port``.

    Only the handshake is attempted; nothing is sent.
    """
    if not hostname:
        return False
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(hostname, port),
            timeout=timeout,
        )
        writer.close()
        await writer.wait_closed()
        return True
    except (TimeoutError, asyncio.TimeoutError, OSError):
        return False


async def probe_hosts(
    hosts: Sequence[HostCredential],
    timeout: float = PROBE_TIMEOUT,
) -> dict[str, bool]:
    """Probe every host's SSH port concurrently.

    Returns:
        {host id: reachable}, in the order given
    """
    if not hosts:
        return {}
    results = await asyncio.gather(
        *(is_port_open(host.host, host.port, timeout) for host in hosts)
    )
    online = {host.id: result for host, result in zip(hosts, results)}
    logger.debug("Probed %d host(s), %d online", len(online), sum(online.values()))
    return online
