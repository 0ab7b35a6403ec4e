"""
Root conftest.py for the vault-leader test suite.

Pytest plugin that checks TRA (Test Responsibility Anchor) and Tier markers.
- Every test declares the single responsibility it protects with @tra
- Every test declares its speed tier with @tier, which sets its timeout
- Violations are reported as warnings unless VAULT_LEADER_MARKERS=strict

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.LeaderResolver")
    def test_something():
        ...
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
    ]
)

# Tier timeout limits in seconds (0 means no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=manual). Sets the timeout.",
    )
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "concurrency: Tests interleaving concurrent callers")


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args and isinstance(marker.args[0], int) and marker.args[0] in TIER_TIMEOUTS:
            return marker.args[0]
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    """Return one message per test with a missing or malformed marker."""
    errors = []

    for item in items:
        tra_markers = list(item.iter_markers(name="tra"))
        if len(tra_markers) != 1 or not tra_markers[0].args:
            errors.append(f"{item.nodeid}: expected exactly one @tra('...') marker")
        else:
            anchor = tra_markers[0].args[0]
            if not isinstance(anchor, str) or not any(
                anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES
            ):
                errors.append(f"{item.nodeid}: invalid TRA anchor {anchor!r}")

        if _get_tier(item) is None:
            errors.append(f"{item.nodeid}: missing or invalid @tier() marker")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply the tier timeout when pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    for item in items:
        if any(item.iter_markers(name="timeout")):
            continue
        tier = _get_tier(item)
        if tier is not None and TIER_TIMEOUTS[tier] > 0:
            item.add_marker(pytest.mark.timeout(TIER_TIMEOUTS[tier]))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and Tier markers at collection time, then apply timeouts."""
    errors = _marker_errors(items)

    if errors:
        if os.environ.get("VAULT_LEADER_MARKERS") == "strict":
            pytest.fail(
                "TRA/Tier marker errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nTRA/Tier marker warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)
