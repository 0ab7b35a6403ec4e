"""Domain layer: Entities with zero external dependencies."""

from vault_leader.domain.exceptions import LeaderResolverConfigError
from vault_leader.domain.leader_status import ProbeResult, is_leader_response
from vault_leader.domain.polling import PollingPolicy
from vault_leader.domain.settings import ResolverSettings

__all__ = [
    "LeaderResolverConfigError",
    "PollingPolicy",
    "ProbeResult",
    "ResolverSettings",
    "is_leader_response",
]
