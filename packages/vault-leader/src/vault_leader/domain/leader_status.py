"""Leader status domain: interpretation of leader endpoint responses."""

from __future__ import annotations

import json
from dataclasses import dataclass

# Field of the leader endpoint body that reports self-leadership
LEADER_FIELD = "is_self"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of probing a single candidate node.

    Attributes:
        address: IPv4 address literal of the probed node.
        is_leader: True only if the node confirmed it is the leader.
        status_code: HTTP status of the response, None on transport failure.
        error: Description of the transport failure, None otherwise.
    """

    address: str
    is_leader: bool
    status_code: int | None = None
    error: str | None = None


def is_leader_response(status_code: int, body: bytes | str) -> bool:
    """Decide whether a leader endpoint response confirms self-leadership.

    The response counts only when the status is exactly 200 and the body is a
    JSON object whose is_self field is the boolean true. Anything else,
    including bodies that are not JSON, is a "not leader" answer.

    Args:
        status_code: HTTP status code of the response.
        body: Raw response body.

    Returns:
        True if the node reported itself as leader, False otherwise.
    """
    if status_code != 200:
        return False

    try:
        payload = json.loads(body)
    except (ValueError, TypeError):
        return False

    if not isinstance(payload, dict):
        return False

    return payload.get(LEADER_FIELD) is True
