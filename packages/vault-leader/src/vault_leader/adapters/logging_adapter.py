"""Logging adapters implementing the LoggingPort."""

from __future__ import annotations

import logging

from vault_leader.adapters.ports import LoggingPort


class StdlibLoggingAdapter:
    """Deliver resolver messages to a standard library logger.

    Uses the "vault_leader" logger unless one is given, so applications can
    route or silence resolver output with regular logging configuration.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger("vault_leader")

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


class NullLoggingAdapter:
    """Logging sink that drops every message."""

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


# Runtime protocol checks
assert isinstance(StdlibLoggingAdapter(), LoggingPort)
assert isinstance(NullLoggingAdapter(), LoggingPort)
