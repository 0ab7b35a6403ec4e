"""Fake logging adapter for testing."""

from __future__ import annotations


class FakeLoggingAdapter:
    """Fake logging adapter that captures log messages for assertion.

    Implements LoggingPort by storing messages per level.

    Example:
        logger = FakeLoggingAdapter()
        await resolver.resolve_leader()
        assert any("active node set" in m for m in logger.infos)
    """

    def __init__(self) -> None:
        """Initialize with empty message lists."""
        self._messages: dict[str, list[str]] = {"debug": [], "info": [], "error": []}

    def debug(self, message: str) -> None:
        self._messages["debug"].append(message)

    def info(self, message: str) -> None:
        self._messages["info"].append(message)

    def error(self, message: str) -> None:
        self._messages["error"].append(message)

    @property
    def debugs(self) -> list[str]:
        return list(self._messages["debug"])

    @property
    def infos(self) -> list[str]:
        return list(self._messages["info"])

    @property
    def errors(self) -> list[str]:
        return list(self._messages["error"])

    def clear(self) -> None:
        """Clear all captured messages."""
        for messages in self._messages.values():
            messages.clear()
