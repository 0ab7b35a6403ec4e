"""Pytest fixtures for vault-leader core unit tests."""

from __future__ import annotations

import pytest

from vault_leader.adapters.fakes import (
    FakeClock,
    FakeDNSResolver,
    FakeHttpClient,
    FakeLoggingAdapter,
)
from vault_leader.domain.polling import PollingPolicy
from vault_leader.usecases.leader_resolver import LeaderResolver

TARGET_URL = "http://any.url.com:8080/"


@pytest.fixture
def fake_dns() -> FakeDNSResolver:
    """DNS resolver answering with a single node by default."""
    return FakeDNSResolver(["10.0.0.1"])


@pytest.fixture
def fake_http() -> FakeHttpClient:
    """HTTP client answering 200 with an empty body by default."""
    return FakeHttpClient()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    return FakeLoggingAdapter()


@pytest.fixture
def resolver(
    fake_dns: FakeDNSResolver,
    fake_http: FakeHttpClient,
    fake_clock: FakeClock,
    fake_logger: FakeLoggingAdapter,
) -> LeaderResolver:
    """LeaderResolver for TARGET_URL wired to fakes, default polling policy."""
    return LeaderResolver(
        target_url=TARGET_URL,
        dns_resolver=fake_dns,
        http_client=fake_http,
        logger=fake_logger,
        polling_policy=PollingPolicy(),
        time_provider=fake_clock,
        sleep=fake_clock.sleep,
    )
