"""Port interfaces for the vault-leader core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Coroutine function used to suspend a round between attempts (asyncio.sleep in production)
Sleeper = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class HTTPResponse:
    """Response of a leader probe.

    Immutable value object holding only what leader detection needs.

    Attributes:
        status_code: HTTP status code returned by the node.
        body: Decoded (decompressed) response body bytes.
    """

    status_code: int
    body: bytes


@runtime_checkable
class DNSResolverPort(Protocol):
    """Port interface for DNS address lookup.

    Implementations expand a hostname into every IPv4 address it resolves to.
    A cluster published under a single DNS name returns one A record per node.

    Contract:
        - lookup_all() returns zero or more IPv4 address literals
        - lookup_all() does not retry on its own
        - May raise OSError (e.g. socket.gaierror) when the lookup fails
    """

    async def lookup_all(self, hostname: str) -> list[str]:
        """Resolve hostname to all of its IPv4 addresses.

        Args:
            hostname: DNS name to resolve.

        Returns:
            List of IPv4 address literals. May be empty.

        Raises:
            OSError: If the lookup fails.
        """
        ...


@runtime_checkable
class HTTPClientPort(Protocol):
    """Port interface for issuing leader probes over HTTP.

    Contract:
        - get() performs a single GET request, no retries
        - timeout applies to the whole request and is shorter than the
          polling interval
        - Compressed responses are accepted and decoded transparently
        - May raise any exception on transport failure (refused, timeout, ...)
    """

    async def get(self, url: str, timeout: float) -> HTTPResponse:
        """Send a GET request.

        Args:
            url: Absolute URL to request.
            timeout: Timeout in seconds for the whole request.

        Returns:
            HTTPResponse with status code and decoded body.

        Raises:
            Exception: Transport-level failures (e.g. httpx.TransportError).
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for leveled logging.

    Implementations deliver messages to a logging backend, or drop them.

    Contract:
        - debug/info/error are fire-and-forget (no return value, no exceptions)
        - A no-op implementation must be acceptable everywhere
    """

    def debug(self, message: str) -> None:
        """Log a debug message."""
        ...

    def info(self, message: str) -> None:
        """Log an info message."""
        ...

    def error(self, message: str) -> None:
        """Log an error message."""
        ...


@runtime_checkable
class TimeProvider(Protocol):
    """Port interface for time operations.

    Implementations provide a clock reading used to measure how long a
    resolution round has been running. Enables deterministic testing
    through fake implementations.

    Contract:
        - get_time_seconds() returns a float number of seconds
        - Successive calls must return non-decreasing values (monotonic)
    """

    def get_time_seconds(self) -> float:
        """Return the current clock reading in seconds."""
        ...


class MonotonicTimeProvider:
    """Default implementation: provides the monotonic system clock.

    Uses time.monotonic() so round deadlines are unaffected by wall clock
    adjustments.
    """

    def get_time_seconds(self) -> float:
        """Return the monotonic clock reading in seconds."""
        return time.monotonic()
