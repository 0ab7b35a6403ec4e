"""Fake HTTP client for testing leader probes."""

from __future__ import annotations

import asyncio
from typing import TypedDict
from urllib.parse import urlsplit

from vault_leader.adapters.ports import HTTPResponse


class RecordedProbe(TypedDict):
    """Recorded probe parameters for test assertions."""

    url: str
    timeout: float


class FakeHttpClient:
    """Fake HTTP client that returns configurable responses.

    Implements HTTPClientPort. Responses and exceptions can be configured
    for all nodes or for a single node address; a node-specific setting
    wins over the default one.

    Example:
        client = FakeHttpClient()
        client.set_response(status_code=200, body=b'{"is_self": false}')
        client.set_response(body=b'{"is_self": true}', address="10.0.0.6")
        response = await client.get("http://10.0.0.6:8200/v1/sys/leader", timeout=0.2)
        assert response.body == b'{"is_self": true}'
        assert client.requests[0]["timeout"] == 0.2
    """

    def __init__(self) -> None:
        """Initialize with default 200 OK response and empty body."""
        self._default = HTTPResponse(status_code=200, body=b"")
        self._responses: dict[str, HTTPResponse] = {}
        self._exception: BaseException | None = None
        self._exceptions: dict[str, BaseException] = {}
        self._requests: list[RecordedProbe] = []

    async def get(self, url: str, timeout: float) -> HTTPResponse:
        """Record the request and return the configured response.

        Raises:
            The configured exception for the address, or the default one.
        """
        self._requests.append(RecordedProbe(url=url, timeout=timeout))
        await asyncio.sleep(0)

        address = urlsplit(url).hostname or ""
        exception = self._exceptions.get(address, self._exception)
        if exception is not None:
            raise exception

        return self._responses.get(address, self._default)

    def set_response(
        self,
        status_code: int | None = None,
        body: bytes | None = None,
        address: str | None = None,
    ) -> None:
        """Configure the response for one address, or for all of them.

        Args:
            status_code: HTTP status code to return. If None, keeps current value.
            body: Response body to return. If None, keeps current value.
            address: Node address the response applies to. None sets the default.
        """
        current = self._default if address is None else self._responses.get(address, self._default)
        response = HTTPResponse(
            status_code=current.status_code if status_code is None else status_code,
            body=current.body if body is None else body,
        )
        if address is None:
            self._default = response
        else:
            self._responses[address] = response

    def set_exception(
        self, exception: BaseException | None, address: str | None = None
    ) -> None:
        """Configure an exception to raise, or None to clear it.

        Args:
            exception: Exception to raise from get().
            address: Node address the exception applies to. None sets the default.
        """
        if address is None:
            self._exception = exception
        elif exception is None:
            self._exceptions.pop(address, None)
        else:
            self._exceptions[address] = exception

    @property
    def requests(self) -> list[RecordedProbe]:
        """Get list of recorded requests in order of receipt."""
        return self._requests

    def clear_requests(self) -> None:
        """Clear all recorded requests."""
        self._requests.clear()
