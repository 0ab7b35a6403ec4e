"""Leader resolver settings domain entity."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from vault_leader.domain.exceptions import LeaderResolverConfigError
from vault_leader.domain.polling import PollingPolicy

_ALLOWED_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class ResolverSettings:
    """Configuration for locating the leader behind a cluster DNS name.

    Value object describing where the cluster lives and how aggressively
    the resolver polls it.

    Attributes:
        target_url: Base address of the cluster (e.g.
                   'http://vault.service.consul:8200/'). The hostname is
                   expected to resolve to one A record per node.
        leader_path: Path of the leader status endpoint on every node.
        probe_timeout: Timeout in seconds of a single leader probe.
                      Must be smaller than retry_interval.
        retry_interval: Delay in seconds between two polling attempts.
        deadline: Seconds after round start past which no attempt is scheduled.
    """

    target_url: str
    leader_path: str = "/v1/sys/leader"
    probe_timeout: float = 0.2
    retry_interval: float = 0.5
    deadline: float = 10.0

    def __post_init__(self) -> None:
        """Validate resolver settings."""
        self._validate_target_url()
        self._validate_leader_path()
        self._validate_timings()

    def _validate_target_url(self) -> None:
        """Validate target_url is an absolute http(s) URL with a hostname."""
        if not isinstance(self.target_url, str) or not self.target_url:
            raise LeaderResolverConfigError("target_url cannot be empty")

        if any(ord(c) < 32 or c == "\x7f" for c in self.target_url):
            raise LeaderResolverConfigError(
                f"target_url contains control characters, got: {self.target_url!r}"
            )

        if self.target_url != self.target_url.strip():
            raise LeaderResolverConfigError(
                f"target_url cannot have leading/trailing whitespace, got: {self.target_url!r}"
            )

        try:
            parts = urlsplit(self.target_url)
            parts.port  # raises ValueError on an invalid port
        except ValueError as e:
            raise LeaderResolverConfigError(f"target_url is not a valid URL: {e}") from e

        if parts.scheme not in _ALLOWED_SCHEMES:
            raise LeaderResolverConfigError(
                f"target_url scheme must be http or https, got: {parts.scheme!r}"
            )

        if not parts.hostname:
            raise LeaderResolverConfigError(
                f"target_url must contain a hostname, got: {self.target_url!r}"
            )

    def _validate_leader_path(self) -> None:
        """Validate leader_path is an absolute path."""
        if not self.leader_path.startswith("/"):
            raise LeaderResolverConfigError(
                f"leader_path must start with '/', got: {self.leader_path!r}"
            )

    def _validate_timings(self) -> None:
        """Validate timeouts are positive and probes finish before the next attempt."""
        if self.probe_timeout <= 0:
            raise LeaderResolverConfigError("probe_timeout must be positive")

        # PollingPolicy validates retry_interval and deadline
        PollingPolicy(retry_interval=self.retry_interval, deadline=self.deadline)

        if self.probe_timeout >= self.retry_interval:
            raise LeaderResolverConfigError(
                "probe_timeout must be smaller than retry_interval"
            )

    @property
    def hostname(self) -> str:
        """Hostname part of target_url, the name resolved on every attempt."""
        hostname = urlsplit(self.target_url).hostname
        assert hostname is not None
        return hostname

    @property
    def polling_policy(self) -> PollingPolicy:
        """Polling policy derived from retry_interval and deadline."""
        return PollingPolicy(retry_interval=self.retry_interval, deadline=self.deadline)
