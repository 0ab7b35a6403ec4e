"""asyncio-based implementation of the DNSResolverPort."""

from __future__ import annotations

import asyncio
import logging
import socket

from vault_leader.adapters.ports import DNSResolverPort

logger = logging.getLogger(__name__)


class AsyncioDNSResolver:
    """Resolve a hostname to all of its IPv4 addresses on the running loop.

    Uses loop.getaddrinfo() restricted to AF_INET, so the lookup runs in the
    loop's executor without blocking other tasks. Duplicate addresses
    (one per socket type/protocol) are collapsed, keeping resolver order.
    """

    async def lookup_all(self, hostname: str) -> list[str]:
        """Resolve hostname to every IPv4 address it has.

        Args:
            hostname: DNS name to resolve.

        Returns:
            Unique IPv4 address literals in resolver order.

        Raises:
            socket.gaierror: If the name cannot be resolved.
        """
        loop = asyncio.get_running_loop()
        infos = await loop.getaddrinfo(
            hostname, None, family=socket.AF_INET, type=socket.SOCK_STREAM
        )

        addresses: list[str] = []
        for _family, _type, _proto, _canonname, sockaddr in infos:
            address = str(sockaddr[0])
            if address not in addresses:
                addresses.append(address)

        logger.debug(f"DNS lookup: {hostname} -> {addresses}")
        return addresses


# Runtime protocol check
assert isinstance(AsyncioDNSResolver(), DNSResolverPort)
