"""Domain exceptions.

Exception hierarchy:
- LeaderResolverConfigError: Base domain exception for configuration errors.
  Raised by domain entities and the settings loader when the resolver
  cannot be configured.

Resolution failures (DNS errors, unreachable nodes, malformed leader
responses) are never raised. They are absorbed by the polling loop and
only visible through logging and the cached leader address.
"""


class LeaderResolverConfigError(Exception):
    """Raised when leader resolver configuration is invalid.

    This is the base exception for all domain-level configuration errors.
    It is raised by ResolverSettings validation and by the settings loader
    when a mapping or YAML file cannot be turned into settings.
    """

    pass
