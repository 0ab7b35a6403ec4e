"""Fake DNS resolver for testing."""

from __future__ import annotations

import asyncio


class FakeDNSResolver:
    """Fake DNS resolver with configurable answers.

    Implements DNSResolverPort. Every lookup yields to the event loop once,
    like a real asynchronous lookup, then returns the configured addresses
    or raises the configured exception.

    Example:
        dns = FakeDNSResolver(["10.0.0.1", "10.0.0.2"])
        assert await dns.lookup_all("vault.local") == ["10.0.0.1", "10.0.0.2"]
        assert dns.lookups == ["vault.local"]
    """

    def __init__(self, addresses: list[str] | None = None) -> None:
        """Initialize with the addresses to return (default: none)."""
        self._addresses: list[str] | None = list(addresses) if addresses else []
        self._exception: BaseException | None = None
        self._lookups: list[str] = []

    async def lookup_all(self, hostname: str) -> list[str]:
        """Record the lookup and return the configured addresses.

        Raises:
            The configured exception if set via set_exception().
        """
        self._lookups.append(hostname)
        await asyncio.sleep(0)

        if self._exception is not None:
            raise self._exception

        return list(self._addresses or [])

    def set_addresses(self, addresses: list[str] | None) -> None:
        """Configure the addresses returned by the next lookups."""
        self._addresses = list(addresses) if addresses else []

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise, or None to resume normal behavior."""
        self._exception = exception

    @property
    def lookups(self) -> list[str]:
        """Hostnames looked up so far, in order."""
        return list(self._lookups)

    @property
    def lookup_count(self) -> int:
        """Number of lookups performed so far."""
        return len(self._lookups)
