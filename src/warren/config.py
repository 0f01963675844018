"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, shared
freely between routers, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict_reverse=False, debug=True)
    """

    # Joins resolver names into a reverse-lookup chain ("api:users:detail")
    separator: str = ":"

    # Reverse lookup: propagate a child's failure instead of returning
    # the router's bare prefix
    strict_reverse: bool = True

    # Put exception text into 500 responses
    debug: bool = False


DEFAULT_CONFIG = RouterConfig()
