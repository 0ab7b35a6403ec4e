"""Interface adapters: DNS, HTTP and logging implementations of the ports."""

from vault_leader.adapters.ports import (
    DNSResolverPort,
    HTTPClientPort,
    HTTPResponse,
    LoggingPort,
    MonotonicTimeProvider,
    Sleeper,
    TimeProvider,
)
from vault_leader.adapters.asyncio_dns_resolver import AsyncioDNSResolver
from vault_leader.adapters.httpx_probe_client import HTTPXProbeClient
from vault_leader.adapters.httpx_leader_routing import LeaderRoutingTransport
from vault_leader.adapters.logging_adapter import NullLoggingAdapter, StdlibLoggingAdapter

__all__ = [
    "DNSResolverPort",
    "HTTPClientPort",
    "HTTPResponse",
    "LoggingPort",
    "MonotonicTimeProvider",
    "Sleeper",
    "TimeProvider",
    "AsyncioDNSResolver",
    "HTTPXProbeClient",
    "LeaderRoutingTransport",
    "NullLoggingAdapter",
    "StdlibLoggingAdapter",
]
