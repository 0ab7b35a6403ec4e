"""Settings loader use case for the leader resolver.

Builds ResolverSettings from a plain mapping (e.g. framework settings) or
from a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from vault_leader.domain.exceptions import LeaderResolverConfigError
from vault_leader.domain.settings import ResolverSettings

# Optional top-level key grouping resolver settings in a shared YAML file
SECTION_KEY = "vault_leader"

_REQUIRED_FIELDS = ("target_url",)

_OPTIONAL_FIELDS = ("leader_path", "probe_timeout", "retry_interval", "deadline")

_NUMERIC_FIELDS = frozenset({"probe_timeout", "retry_interval", "deadline"})


def get_resolver_settings(mapping: dict[str, Any]) -> ResolverSettings:
    """Convert a settings mapping to a ResolverSettings domain object.

    Args:
        mapping: Dict with snake_case keys. target_url is required; the
                timing keys and leader_path are optional.

    Returns:
        ResolverSettings domain object

    Raises:
        LeaderResolverConfigError: If keys are missing, unknown or invalid
    """
    missing = [key for key in _REQUIRED_FIELDS if key not in mapping]
    if missing:
        raise LeaderResolverConfigError(
            f"Missing required resolver settings: {', '.join(sorted(missing))}"
        )

    known = set(_REQUIRED_FIELDS) | set(_OPTIONAL_FIELDS)
    unknown = [key for key in mapping if key not in known]
    if unknown:
        raise LeaderResolverConfigError(
            f"Unknown resolver settings: {', '.join(sorted(unknown))}"
        )

    kwargs: dict[str, Any] = {}
    for field in (*_REQUIRED_FIELDS, *_OPTIONAL_FIELDS):
        if field not in mapping:
            continue
        value = mapping[field]
        if field in _NUMERIC_FIELDS:
            # bool is an int subclass but never a valid duration
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise LeaderResolverConfigError(
                    f"{field} must be a number of seconds, got: {value!r}"
                )
            value = float(value)
        elif not isinstance(value, str):
            raise LeaderResolverConfigError(f"{field} must be a string, got: {value!r}")
        kwargs[field] = value

    # Validation of values happens in __post_init__
    return ResolverSettings(**kwargs)


def load_resolver_settings(path: str | Path) -> ResolverSettings:
    """Load ResolverSettings from a YAML file.

    The settings may sit at the top level of the document or under a
    "vault_leader" key.

    Args:
        path: Path to the YAML file.

    Returns:
        ResolverSettings domain object

    Raises:
        LeaderResolverConfigError: If the file cannot be read, is not valid
            YAML, or does not describe valid settings
    """
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise LeaderResolverConfigError(f"Cannot read settings file {path}: {e}") from e

    try:
        config = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LeaderResolverConfigError(f"Invalid YAML: {e}") from e

    if isinstance(config, dict) and SECTION_KEY in config:
        config = config[SECTION_KEY]

    if not isinstance(config, dict):
        raise LeaderResolverConfigError("Config must be a dictionary")

    return get_resolver_settings(config)
