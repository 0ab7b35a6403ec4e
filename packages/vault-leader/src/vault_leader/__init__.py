"""vault-leader: Locate and route to the leader of a DNS-published cluster."""

__version__ = "0.1.0"

from vault_leader.domain.settings import ResolverSettings
from vault_leader.domain.exceptions import LeaderResolverConfigError
from vault_leader.usecases.leader_resolver import LeaderResolver
from vault_leader.usecases.settings_loader import load_resolver_settings

__all__ = [
    "ResolverSettings",
    "LeaderResolverConfigError",
    "LeaderResolver",
    "load_resolver_settings",
]
