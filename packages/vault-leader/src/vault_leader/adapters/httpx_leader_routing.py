"""HTTPX transport that routes requests to the cluster leader.

Wraps another httpx.AsyncBaseTransport and rewrites the host of every
outgoing request to the leader address cached by a LeaderResolver. The
Host header is left as built by httpx and the TLS server name is pinned
to the original host, so both keep naming the cluster.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from vault_leader.usecases.leader_resolver import LeaderResolver

logger = logging.getLogger(__name__)


class LeaderRoutingTransport(httpx.AsyncBaseTransport):
    """Async transport sending each request to the current leader.

    When no leader is cached yet the request goes to the original URL and
    the resolver starts a round in the background. When a request sent to a
    leader address fails at transport level, a new round is started in the
    background before the error is re-raised, so the following requests
    reach the new leader once it has been found.

    Usage:
        resolver = LeaderResolver.from_settings(settings)
        async with httpx.AsyncClient(
            base_url=settings.target_url,
            transport=LeaderRoutingTransport(resolver),
        ) as client:
            await client.get("/v1/secret/data/app")
    """

    def __init__(
        self,
        resolver: LeaderResolver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the leader routing transport.

        Args:
            resolver: Resolver providing the leader address.
            transport: Transport that performs the requests
                      (default: httpx.AsyncHTTPTransport()).
        """
        self._resolver = resolver
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Rewrite the request URL to the leader and send it.

        Args:
            request: Outgoing request.

        Returns:
            Response from the wrapped transport.

        Raises:
            httpx.TransportError: Re-raised from the wrapped transport.
        """
        original_url = str(request.url)
        routed_url = self._resolver.rewrite_host(original_url)
        if routed_url != original_url:
            # TLS must still name the cluster, not the leader's address
            request.extensions["sni_hostname"] = request.url.host
            request.url = httpx.URL(routed_url)

        try:
            return await self._transport.handle_async_request(request)
        except httpx.TransportError as e:
            if routed_url != original_url:
                logger.warning(
                    f"Request to leader {request.url.host} failed: {e!r}. "
                    "Resolving the leader again."
                )
                self._resolver.resolve_leader_in_background()
            raise

    async def aclose(self) -> None:
        """Close the wrapped transport."""
        await self._transport.aclose()
