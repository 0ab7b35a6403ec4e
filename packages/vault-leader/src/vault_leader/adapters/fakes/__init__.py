"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from vault_leader.adapters.fakes.fake_clock import FakeClock
from vault_leader.adapters.fakes.fake_dns_resolver import FakeDNSResolver
from vault_leader.adapters.fakes.fake_http_client import FakeHttpClient, RecordedProbe
from vault_leader.adapters.fakes.fake_logging_adapter import FakeLoggingAdapter

__all__ = [
    "FakeClock",
    "FakeDNSResolver",
    "FakeHttpClient",
    "FakeLoggingAdapter",
    "RecordedProbe",
]
