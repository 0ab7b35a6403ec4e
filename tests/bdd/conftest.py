"""Shared fixtures for BDD tests."""

import pytest

from vault_leader.adapters.fakes import (
    FakeClock,
    FakeDNSResolver,
    FakeHttpClient,
    FakeLoggingAdapter,
)
from vault_leader.usecases.leader_resolver import LeaderResolver

CLUSTER_URL = "http://vault.service.consul:8200/"


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {}


@pytest.fixture
def cluster_dns() -> FakeDNSResolver:
    return FakeDNSResolver()


@pytest.fixture
def cluster_http() -> FakeHttpClient:
    client = FakeHttpClient()
    client.set_response(status_code=200, body=b'{"is_self": false}')
    return client


@pytest.fixture
def cluster_resolver(
    cluster_dns: FakeDNSResolver, cluster_http: FakeHttpClient
) -> LeaderResolver:
    """Resolver for CLUSTER_URL on fakes with a simulated clock."""
    clock = FakeClock()
    return LeaderResolver(
        target_url=CLUSTER_URL,
        dns_resolver=cluster_dns,
        http_client=cluster_http,
        logger=FakeLoggingAdapter(),
        time_provider=clock,
        sleep=clock.sleep,
    )
