"""Polling policy domain value object."""

from dataclasses import dataclass

from vault_leader.domain.exceptions import LeaderResolverConfigError


@dataclass(frozen=True)
class PollingPolicy:
    """Fixed-interval polling policy for a resolution round.

    A round that finds no leader checks the elapsed time since it started.
    While the elapsed time is within the deadline the round sleeps for
    retry_interval and tries again; once it exceeds the deadline the round
    aborts. The check happens before the sleep, so with the defaults a round
    that never succeeds makes 22 attempts (t = 0, 0.5, ..., 10.0, 10.5).

    Attributes:
        retry_interval: Delay in seconds between two attempts. Must be positive.
        deadline: Maximum elapsed seconds after which no further attempt is
                 scheduled. Must be positive.
    """

    retry_interval: float = 0.5
    deadline: float = 10.0

    def __post_init__(self) -> None:
        """Validate polling policy configuration."""
        if self.retry_interval <= 0:
            raise LeaderResolverConfigError("retry_interval must be positive")
        if self.deadline <= 0:
            raise LeaderResolverConfigError("deadline must be positive")

    def should_retry(self, elapsed: float) -> bool:
        """Determine if another attempt should be scheduled.

        Args:
            elapsed: Seconds elapsed since the round started.

        Returns:
            True if elapsed <= deadline, False otherwise.
        """
        return elapsed <= self.deadline
