"""Fake clock for testing polling without real delays."""

from __future__ import annotations

import asyncio


class FakeClock:
    """Fake time provider whose sleep advances the clock instantly.

    Implements TimeProvider and can be passed as the resolver's sleep
    function, so a ten second polling round runs in microseconds.

    Example:
        clock = FakeClock()
        await clock.sleep(0.5)
        assert clock.get_time_seconds() == 0.5
        assert clock.sleeps == [0.5]
    """

    def __init__(self, start: float = 0.0) -> None:
        """Initialize the clock at start seconds."""
        self._now = start
        self._sleeps: list[float] = []

    def get_time_seconds(self) -> float:
        """Return the fake current time."""
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward without sleeping."""
        self._now += seconds

    async def sleep(self, seconds: float) -> None:
        """Advance the clock by seconds and yield to the event loop once."""
        self._sleeps.append(seconds)
        self._now += seconds
        await asyncio.sleep(0)

    @property
    def sleeps(self) -> list[float]:
        """Durations passed to sleep(), in order."""
        return list(self._sleeps)
