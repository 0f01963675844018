"""Resolver protocol — the capability shared by Route and Router.

Anything with this shape can be mounted in a Router::

    class Redirects:
        name = "legacy"

        def resolve(self, path: str) -> RouteMatch | None: ...
        def reverse(self, name: str, params: Mapping[str, Any]) -> str | None: ...

No base class required. Routers check the shape, not the lineage.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from warren.routing.route import RouteMatch


@runtime_checkable
class Resolver(Protocol):
    """A node in the routing tree.

    ``name`` is both the key under the parent router and the segment
    that selects this node in a reverse-lookup chain. It must not
    contain the chain separator and must not change once registered.

    ``resolve`` receives a path already stripped of every ancestor
    prefix (always absolute). ``reverse`` receives the rest of the
    chain after the parent consumed this node's segment.
    """

    @property
    def name(self) -> str: ...

    def resolve(self, path: str) -> RouteMatch | None: ...

    def reverse(self, name: str, params: Mapping[str, Any]) -> str | None: ...
