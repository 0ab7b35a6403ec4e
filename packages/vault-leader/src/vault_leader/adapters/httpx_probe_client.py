"""HTTPX-based implementation of the HTTPClientPort.

This adapter uses httpx to ask cluster nodes whether they are the leader.
"""

from __future__ import annotations

import asyncio

import httpx

from vault_leader.adapters.ports import HTTPClientPort, HTTPResponse

# httpx decodes these transparently
_ACCEPT_ENCODING = "gzip, deflate"


class HTTPXProbeClient:
    """HTTPX-based adapter for leader probes.

    Sends a single GET per call with a per-call timeout. Compressed
    responses are requested and decoded by httpx, so the returned body is
    always plain bytes.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the HTTPX probe client.

        Args:
            client: Optional httpx.AsyncClient for connection reuse or
                   dependency injection (testing). If not provided, a new
                   client is created per request.
        """
        self._client = client

    async def get(self, url: str, timeout: float) -> HTTPResponse:
        """Send a GET request to a candidate node.

        Args:
            url: Absolute URL of the node's leader endpoint.
            timeout: Timeout in seconds for the whole request.

        Returns:
            HTTPResponse containing status code and decoded body.

        Raises:
            httpx.TransportError: For network failures.
            httpx.TimeoutException: If the request as a whole outlives timeout.
        """
        # httpx bounds each phase separately, wait_for bounds the total
        try:
            return await asyncio.wait_for(self._send(url, timeout), timeout)
        except asyncio.TimeoutError as e:
            raise httpx.TimeoutException(
                f"Leader probe to {url} exceeded {timeout}s"
            ) from e

    async def _send(self, url: str, timeout: float) -> HTTPResponse:
        headers = {"Accept-Encoding": _ACCEPT_ENCODING}

        if self._client is not None:
            response = await self._client.get(url, headers=headers, timeout=timeout)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, headers=headers, timeout=timeout)

        return HTTPResponse(status_code=response.status_code, body=response.content)


# Runtime protocol check
assert isinstance(HTTPXProbeClient(), HTTPClientPort)
