"""Leader resolver use case.

Locates the leader of a replicated cluster published under a single DNS
name and caches its address for request routing.

A resolution round expands the cluster hostname to all of its IPv4
addresses, probes every address concurrently and caches the one that
reports itself as leader. Rounds that find no leader poll again at a
fixed interval until a deadline measured from round start, then give up
without touching the cached address.
"""

from __future__ import annotations

import asyncio
import uuid
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from vault_leader.adapters.ports import (
    DNSResolverPort,
    HTTPClientPort,
    LoggingPort,
    MonotonicTimeProvider,
    Sleeper,
    TimeProvider,
)
from vault_leader.domain.exceptions import LeaderResolverConfigError
from vault_leader.domain.polling import PollingPolicy
from vault_leader.usecases.leader_prober import LeaderProber
from vault_leader.usecases.url_rewriter import rewrite_host

if TYPE_CHECKING:
    from vault_leader.domain.settings import ResolverSettings


class LeaderResolver:
    """Finds and caches the leader address of a cluster.

    The resolver owns two pieces of mutable state:

    - leader_ip: absent until the first successful round, then replaced only
      by later successful rounds. A failed round never clears it.
    - is_resolving: a single-flight flag, true while a round is running.
      Callers arriving while it is set are released immediately; they are
      not queued and do not receive the running round's outcome.

    All state is mutated on the event loop by the running round only, so no
    lock is needed. Readers may observe a stale leader_ip.

    Examples:
        Explicit resolution::

            resolver = LeaderResolver.from_settings(
                ResolverSettings(target_url="http://vault.service.consul:8200/")
            )
            await resolver.resolve_leader()
            resolver.leader_ip  # "10.0.0.3" or None

        Lazy resolution while routing requests::

            url = resolver.rewrite_host("http://vault.service.consul:8200/v1/kv/a")
            # first call: url unchanged, a round starts in the background
            # later calls: "http://10.0.0.3:8200/v1/kv/a"
    """

    def __init__(
        self,
        target_url: str,
        dns_resolver: DNSResolverPort,
        http_client: HTTPClientPort,
        logger: LoggingPort,
        polling_policy: PollingPolicy | None = None,
        leader_path: str = "/v1/sys/leader",
        probe_timeout: float = 0.2,
        time_provider: TimeProvider | None = None,
        sleep: Sleeper | None = None,
    ) -> None:
        """Initialize leader resolver.

        Args:
            target_url: Base URL of the cluster. Its hostname is resolved on
                       every attempt.
            dns_resolver: Expands the hostname to candidate addresses.
            http_client: Sends the leader probes.
            logger: Sink for progress and failure messages. May be a no-op.
            polling_policy: Retry interval and deadline (default 0.5s / 10s).
            leader_path: Path of the leader status endpoint on each node.
            probe_timeout: Timeout in seconds of a single probe.
            time_provider: Clock used to measure round duration
                          (default: monotonic clock).
            sleep: Coroutine function used to wait between attempts
                  (default: asyncio.sleep).
        """
        self._target_url = target_url
        self._hostname = _hostname_of(target_url)
        self._dns_resolver = dns_resolver
        self._logger = logger
        self._polling_policy = polling_policy or PollingPolicy()
        self._time_provider = time_provider or MonotonicTimeProvider()
        self._sleep = sleep or asyncio.sleep
        self._prober = LeaderProber(
            target_url=target_url,
            http_client=http_client,
            logger=logger,
            leader_path=leader_path,
            timeout=probe_timeout,
        )

        self._leader_ip: str | None = None
        self._resolving = False
        self._background_tasks: set[asyncio.Task[None]] = set()

    @classmethod
    def from_settings(
        cls,
        settings: ResolverSettings,
        dns_resolver: DNSResolverPort | None = None,
        http_client: HTTPClientPort | None = None,
        logger: LoggingPort | None = None,
    ) -> LeaderResolver:
        """Create a resolver wired to the production adapters.

        Args:
            settings: Validated resolver settings.
            dns_resolver: Override for the asyncio DNS resolver.
            http_client: Override for the httpx probe client.
            logger: Override for the standard library logging adapter.

        Returns:
            A LeaderResolver for settings.target_url.
        """
        from vault_leader.adapters.asyncio_dns_resolver import AsyncioDNSResolver
        from vault_leader.adapters.httpx_probe_client import HTTPXProbeClient
        from vault_leader.adapters.logging_adapter import StdlibLoggingAdapter

        return cls(
            target_url=settings.target_url,
            dns_resolver=dns_resolver or AsyncioDNSResolver(),
            http_client=http_client or HTTPXProbeClient(),
            logger=logger or StdlibLoggingAdapter(),
            polling_policy=settings.polling_policy,
            leader_path=settings.leader_path,
            probe_timeout=settings.probe_timeout,
        )

    @property
    def target_url(self) -> str:
        """Configured base URL of the cluster."""
        return self._target_url

    @property
    def leader_ip(self) -> str | None:
        """Address of the last confirmed leader, None before the first success."""
        return self._leader_ip

    @property
    def is_resolving(self) -> bool:
        """True while a resolution round is running."""
        return self._resolving

    async def resolve_leader(self) -> None:
        """Run a resolution round, or return at once if one is running.

        Returns when this call's work is done: immediately if another round
        holds the single-flight flag, otherwise when the round either cached
        a leader or passed its deadline. The outcome is observed through
        leader_ip, never through an exception. Cancellation propagates after
        the flag is cleared.
        """
        self._logger.debug("will look for the leader only if no round is running")
        if self._resolving:
            return

        self._resolving = True
        try:
            await self._run_round()
        finally:
            self._resolving = False

    def resolve_leader_in_background(self) -> asyncio.Task[None]:
        """Schedule resolve_leader() on the running loop without waiting for it.

        Returns:
            The spawned task. Callers may ignore it; the resolver keeps a
            reference until it finishes.

        Raises:
            RuntimeError: If no event loop is running in this thread.
        """
        task = asyncio.get_running_loop().create_task(self.resolve_leader())
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        return task

    def rewrite_host(self, url: str) -> str:
        """Route url to the cached leader.

        With a cached leader the host of url is replaced by its address and
        everything else is kept. Without one, url is returned unchanged and a
        resolution round is started in the background so later calls can be
        routed; this call's result does not depend on that round.

        Args:
            url: URL rooted at the cluster's target address.

        Returns:
            The rewritten URL, or url itself when no leader is cached.
        """
        leader_ip = self._leader_ip
        if leader_ip is not None:
            return rewrite_host(url, leader_ip)

        try:
            self.resolve_leader_in_background()
        except RuntimeError:
            self._logger.debug(
                "no running event loop, leader resolution not started"
            )
        return url

    async def _run_round(self) -> None:
        """Poll DNS and probes until a leader is cached or the deadline passes."""
        round_id = uuid.uuid4()
        started = self._time_provider.get_time_seconds()
        self._logger.info(
            f"searching for active node {round_id} started={started} url={self._target_url}"
        )

        while True:
            leader = await self._attempt()
            if leader is not None:
                self._leader_ip = leader
                self._logger.info(f"active node set {round_id} ip={leader}")
                return

            elapsed = self._time_provider.get_time_seconds() - started
            if not self._polling_policy.should_retry(elapsed):
                self._logger.error(
                    f"no active node found {round_id}, giving up after {elapsed:.1f}s"
                )
                return

            self._logger.info("no active node was found, trying again")
            await self._sleep(self._polling_policy.retry_interval)

    async def _attempt(self) -> str | None:
        """Run one DNS lookup and probe fan-out.

        Returns:
            The leader's address, or None if the lookup failed, returned no
            address, or no node confirmed leadership.
        """
        self._logger.debug(f"trying to resolve {self._hostname}")
        try:
            addresses = await self._dns_resolver.lookup_all(self._hostname)
        except Exception as e:
            self._logger.info(f"no address was found for {self._hostname}: {e!r}")
            return None

        if not addresses:
            self._logger.info(f"no address was found for {self._hostname}")
            return None

        self._logger.debug(f"dns lookup for {self._hostname} returned {addresses}")
        return await self._prober.find_leader(addresses)


def _hostname_of(url: str) -> str:
    """Extract the hostname that is resolved on every attempt."""
    hostname = urlsplit(url).hostname
    if not hostname:
        raise LeaderResolverConfigError(
            f"target_url must contain a hostname, got: {url!r}"
        )
    return hostname
