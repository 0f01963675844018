"""Route, RouteMatch and PathParams frozen types."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from warren._internal.types import Handler
from warren.routing.pattern import PathPattern


class PathParams(Mapping[str, str]):
    """Immutable mapping of captured path parameters.

    The request-scoped parameter bag: attached to ``Request.path_params``
    and published through ``warren.context.path_params_var``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        object.__setattr__(self, "_data", dict(data or {}))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "PathParams is immutable"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"PathParams({self._data!r})"


@dataclass(frozen=True, slots=True)
class Route:
    """A leaf resolver: a path pattern bound to a terminal handler.

    Created once while wiring the router tree and immutable afterwards,
    so its ``name`` can never drift from the key it is registered under.
    Unnamed routes all share the key ``""``, so a router keeps only the
    last one added; name every route mounted beside another.

    Usage::

        route = Route("/users/{id:int}", show_user, name="detail")
        route.resolve("/users/42")      # RouteMatch(route, {"id": "42"})
        route.reverse("", {"id": 7})    # "/users/7"
    """

    path: str
    handler: Handler
    name: str = ""
    pattern: PathPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", PathPattern.compile(self.path))

    def resolve(self, path: str) -> "RouteMatch | None":
        """Match *path* against this route's pattern."""
        groups = self.pattern.match(path)
        if groups is None:
            return None
        return RouteMatch(route=self, path_params=PathParams(groups))

    def reverse(self, name: str, params: Mapping[str, Any]) -> str | None:
        """Build this route's path from *params*.

        *name* is whatever is left of the lookup chain once parents have
        consumed their segments; a leaf has nothing to delegate to, so
        anything but ``""`` is a miss.
        """
        if name:
            return None
        return self.pattern.format(params)

    def get_groups(self, path: str) -> dict[str, str]:
        """Named parameters captured from *path*, or ``{}`` on no match."""
        return self.pattern.match(path) or {}


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: PathParams
