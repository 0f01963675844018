"""Warren — a hierarchical URL router for ASGI.

Routers nest under path prefixes and namespaces; requests resolve down
the tree to a leaf route, and names reverse back up it to a path.

Basic usage::

    from warren import Route, Router

    def show_user(id: int) -> dict:
        return {"id": id}

    users = Router("/users", "users", None, Route("/{id:int}", show_user, name="detail"))
    app = Router("/", "", None, users)

    app.reverse("users:detail", {"id": "7"})   # "/users/7"

``app`` is an ASGI application; hand it to any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "NoReverseMatch",
    "NotFound",
    "PathParams",
    "Request",
    "Resolver",
    "Response",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "WarrenError",
    "get_path_param",
    "get_path_params",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warren`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from warren.routing.router import Router

        return Router

    if name in ("Route", "RouteMatch", "PathParams"):
        from warren.routing import route as _route

        return getattr(_route, name)

    if name == "Resolver":
        from warren.routing.resolver import Resolver

        return Resolver

    if name == "RouterConfig":
        from warren.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from warren.http.request import Request

        return Request

    if name == "Response":
        from warren.http.response import Response

        return Response

    if name in ("get_request", "get_path_params", "get_path_param"):
        from warren import context as _ctx

        return getattr(_ctx, name)

    if name in ("WarrenError", "ConfigurationError", "HTTPError", "NoReverseMatch", "NotFound"):
        from warren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
