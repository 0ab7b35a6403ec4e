"""Use cases: Application logic layer."""

from vault_leader.usecases.leader_prober import LeaderProber, build_probe_url
from vault_leader.usecases.leader_resolver import LeaderResolver
from vault_leader.usecases.settings_loader import (
    get_resolver_settings,
    load_resolver_settings,
)
from vault_leader.usecases.url_rewriter import rewrite_host

__all__ = [
    "LeaderProber",
    "LeaderResolver",
    "build_probe_url",
    "get_resolver_settings",
    "load_resolver_settings",
    "rewrite_host",
]
