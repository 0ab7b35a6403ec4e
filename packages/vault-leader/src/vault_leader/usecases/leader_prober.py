"""Leader prober use case.

Fans out one leader probe per candidate address and reports which
address, if any, confirmed that it is the leader.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from urllib.parse import urlsplit, urlunsplit

from vault_leader.adapters.ports import HTTPClientPort, LoggingPort
from vault_leader.domain.leader_status import ProbeResult, is_leader_response
from vault_leader.usecases.url_rewriter import rewrite_host


def build_probe_url(target_url: str, address: str, leader_path: str) -> str:
    """Build the leader endpoint URL of the node at address.

    The target URL's host is replaced by address and leader_path is appended
    to its path. Query string and fragment are not sent to the probe.

    Examples:
        >>> build_probe_url("http://vault.local:8200/", "10.0.0.1", "/v1/sys/leader")
        'http://10.0.0.1:8200/v1/sys/leader'

    Args:
        target_url: Base URL of the cluster.
        address: IPv4 address literal of the candidate node.
        leader_path: Path of the leader status endpoint.

    Returns:
        Absolute URL of the candidate's leader endpoint.
    """
    parts = urlsplit(rewrite_host(target_url, address))
    path = parts.path.rstrip("/") + leader_path
    return urlunsplit(parts._replace(path=path, query="", fragment=""))


class LeaderProber:
    """Probes candidate nodes concurrently for self-reported leadership.

    Every probe failure (transport error, timeout, non-200 status, malformed
    body, is_self false or missing) is a "not leader" result for that
    address. No probe is retried individually.
    """

    def __init__(
        self,
        target_url: str,
        http_client: HTTPClientPort,
        logger: LoggingPort,
        leader_path: str = "/v1/sys/leader",
        timeout: float = 0.2,
    ) -> None:
        """Initialize leader prober.

        Args:
            target_url: Base URL of the cluster; scheme, port and path are reused.
            http_client: Client used to send the probes.
            logger: Sink for probe outcome messages.
            leader_path: Path of the leader status endpoint on each node.
            timeout: Timeout in seconds of a single probe.
        """
        self._target_url = target_url
        self._http_client = http_client
        self._logger = logger
        self._leader_path = leader_path
        self._timeout = timeout

    async def probe(self, address: str) -> ProbeResult:
        """Ask the node at address whether it is the leader.

        Args:
            address: IPv4 address literal of the candidate node.

        Returns:
            ProbeResult for the address. Never raises for I/O failures.
        """
        url = build_probe_url(self._target_url, address, self._leader_path)

        try:
            response = await self._http_client.get(url, timeout=self._timeout)
        except Exception as e:
            self._logger.info(f"leader probe failed for {address}: {e!r}")
            return ProbeResult(address=address, is_leader=False, error=repr(e))

        is_leader = is_leader_response(response.status_code, response.body)
        if is_leader:
            self._logger.info(f"leader found: {address}")
        else:
            self._logger.info(
                f"not the leader: {address} (status {response.status_code})"
            )
            self._logger.debug(f"leader response body for {address}: {response.body!r}")

        return ProbeResult(
            address=address, is_leader=is_leader, status_code=response.status_code
        )

    async def probe_all(self, addresses: Iterable[str]) -> list[ProbeResult]:
        """Probe every address concurrently and wait for all of them.

        Args:
            addresses: Candidate IPv4 address literals.

        Returns:
            One ProbeResult per address, in input order.
        """
        return list(await asyncio.gather(*(self.probe(a) for a in addresses)))

    async def find_leader(self, addresses: Iterable[str]) -> str | None:
        """Return the address that confirmed leadership, if any.

        When several nodes claim leadership, the first one in address order
        wins.

        Args:
            addresses: Candidate IPv4 address literals.

        Returns:
            The leader's address, or None if no node confirmed leadership.
        """
        for result in await self.probe_all(addresses):
            if result.is_leader:
                return result.address
        return None
