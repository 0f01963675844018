"""Hierarchical router: prefix-scoped, namespaced, nestable.

A Router is both a Resolver (so routers mount inside routers) and an
ASGI application (so the root of the tree is served directly).
"""

import logging
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from warren._internal.asgi import Receive, Scope, Send
from warren.config import DEFAULT_CONFIG, RouterConfig
from warren.errors import ConfigurationError, NoReverseMatch, NotFound
from warren.http.request import Request
from warren.http.response import Response
from warren.routing.resolver import Resolver
from warren.routing.route import PathParams, Route, RouteMatch
from warren.server.handler import dispatch, handle_request

logger = logging.getLogger("warren.routing")


def normalize_prefix(prefix: str) -> str:
    """Exactly one leading slash, no trailing slash; ``""`` becomes ``"/"``."""
    return "/" + prefix.strip("/")


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """A leaf route as seen from a router: qualified name and full path."""

    name: str
    path: str
    route: Route
    is_default: bool = False


class Router:
    """A group of resolvers under a shared path prefix and namespace.

    Usage::

        users = Router("/users", "users", None, Route("/{id}", show, name="detail"))
        root = Router("/", "", None, users)

        root.resolve("/users/7")                     # RouteMatch(detail, {"id": "7"})
        root.reverse("users:detail", {"id": "7"})    # "/users/7"

    Children are tried in registration order and the first match wins.
    ``add`` may run while requests are being served: writers serialize
    on a lock and publish a fresh mapping, readers take whichever
    mapping is current without locking.
    """

    __slots__ = ("_config", "_default_route", "_lock", "_namespace", "_prefix", "_resolvers")

    def __init__(
        self,
        prefix: str = "/",
        namespace: str = "",
        default_route: Route | None = None,
        *resolvers: Resolver,
        config: RouterConfig | None = None,
    ) -> None:
        self._prefix = normalize_prefix(prefix)
        self._namespace = namespace
        self._default_route = default_route
        self._config = config or DEFAULT_CONFIG
        self._lock = threading.Lock()
        # Replaced wholesale on every add(), never mutated in place
        self._resolvers: dict[str, Resolver] = {}

        for resolver in resolvers:
            self.add(resolver)

    def __repr__(self) -> str:
        return f"Router(prefix={self._prefix!r}, namespace={self._namespace!r})"

    # -- Properties --

    @property
    def name(self) -> str:
        """The router's namespace; its segment in reverse-lookup chains."""
        return self._namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def default_route(self) -> Route | None:
        return self._default_route

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def resolvers(self) -> tuple[Resolver, ...]:
        """Child resolvers in resolution order."""
        return tuple(self._resolvers.values())

    def get(self, name: str) -> Resolver | None:
        """Return the child registered under *name*, if any."""
        return self._resolvers.get(name)

    # -- Wiring --

    def add(self, resolver: Resolver) -> None:
        """Register *resolver* under its ``name``.

        An existing child with the same name is replaced in place (it
        keeps its position in resolution order). The key is taken once;
        a resolver that later changes its own name is not re-indexed.
        """
        name = resolver.name
        if self._config.separator in name:
            msg = (
                f"Resolver name {name!r} contains the separator "
                f"{self._config.separator!r}; reverse lookup could not address it."
            )
            raise ConfigurationError(msg)

        with self._lock:
            resolvers = dict(self._resolvers)
            if name in resolvers:
                if name:
                    logger.debug("Replacing resolver %r in %r", name, self)
                else:
                    logger.warning("Unnamed resolver replaces an earlier unnamed one in %r", self)
            resolvers[name] = resolver
            self._resolvers = resolvers

    # -- Resolution --

    def _strip_prefix(self, path: str) -> str | None:
        """Path relative to this router, or ``None`` if outside the prefix."""
        if not path.startswith(self._prefix):
            return None
        if self._prefix != "/":
            rest = path[len(self._prefix) :]
            # "/api" owns "/api" and "/api/..." but not "/apiv2"
            if rest and not rest.startswith("/"):
                return None
            path = rest
        return "/" + path.strip("/")

    def resolve(self, path: str) -> RouteMatch | None:
        """Find the leaf route for *path*.

        Falls back to the default route for any path under the prefix
        that no child matches; the default route's own pattern is not
        consulted for that decision.
        """
        remainder = self._strip_prefix(path)
        if remainder is None:
            return None

        for resolver in self._resolvers.values():
            match = resolver.resolve(remainder)
            if match is not None:
                return match

        if self._default_route is not None:
            logger.debug("No child of %r matched %r, using default route", self, remainder)
            groups = self._default_route.get_groups(remainder)
            return RouteMatch(route=self._default_route, path_params=PathParams(groups))

        return None

    def match(self, path: str) -> RouteMatch:
        """Like ``resolve`` but raises ``NotFound`` on a miss."""
        match = self.resolve(path)
        if match is None:
            raise NotFound(f"No route matches {path!r}")
        return match

    # -- Reverse lookup --

    def _join(self, fragment: str) -> str:
        path = f"{self._prefix}/{fragment.removeprefix('/')}"
        # Only the first "//" at the prefix boundary is collapsed
        return path.replace("//", "/", 1)

    def reverse(self, name: str, params: Mapping[str, Any] | None = None) -> str | None:
        """Build the path for a separator-delimited name chain.

        The first segment picks a child of this router; the rest of the
        chain is handed to that child. Returns ``None`` when no child has
        that name, or (with ``strict_reverse``) when the child cannot
        build its part.
        """
        head, _, rest = name.partition(self._config.separator)
        resolver = self._resolvers.get(head)
        if resolver is None:
            return None

        fragment = resolver.reverse(rest, params or {})
        if fragment is None:
            if self._config.strict_reverse:
                return None
            logger.debug("Child %r could not reverse %r, using bare prefix", head, rest)
            fragment = ""
        return self._join(fragment)

    def url_for(self, name: str, /, **params: Any) -> str:
        """Like ``reverse`` but raises ``NoReverseMatch`` on a miss."""
        path = self.reverse(name, params)
        if path is None:
            raise NoReverseMatch(f"Cannot reverse {name!r} with parameters {sorted(params)}")
        return path

    # -- Introspection --

    def iter_routes(self) -> Iterator[RouteInfo]:
        """Yield every leaf route below this router, depth-first.

        Names are qualified relative to this router (its own namespace is
        not included) and paths include every prefix down to the leaf.
        Resolvers that are neither routers nor routes are skipped.
        """
        sep = self._config.separator
        for resolver in self._resolvers.values():
            if isinstance(resolver, Router):
                for info in resolver.iter_routes():
                    yield RouteInfo(
                        name=f"{resolver.name}{sep}{info.name}",
                        path=self._join(info.path),
                        route=info.route,
                        is_default=info.is_default,
                    )
            elif isinstance(resolver, Route):
                yield RouteInfo(name=resolver.name, path=self._join(resolver.path), route=resolver)

        if self._default_route is not None:
            yield RouteInfo(
                name=self._default_route.name,
                path=self._join(self._default_route.path),
                route=self._default_route,
                is_default=True,
            )

    # -- Serving --

    async def handle(self, request: Request) -> Response:
        """Dispatch *request* to its leaf handler; bare 404 on no match."""
        return await dispatch(self, request, debug=self._config.debug)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        await handle_request(scope, receive, send, router=self)
