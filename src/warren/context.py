"""Request-scoped context via ContextVar.

Provides:
- ``request_var``: The current ``Request`` for this task/thread.
- ``path_params_var``: The path parameters captured for the current request.

Both are set by ``Router.handle`` before the leaf handler runs and reset
afterwards. The ContextVar objects themselves are the lookup keys, so
parameters can never collide with context data from other libraries.
Accessing them outside a request raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from contextvars import ContextVar

from warren.http.request import Request
from warren.routing.route import PathParams

# -- Request context --

request_var: ContextVar[Request] = ContextVar("warren_request")
"""The current request. Set by the router before dispatch."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


# -- Path parameters --

path_params_var: ContextVar[PathParams] = ContextVar("warren_path_params")
"""Parameters captured by the matched route for the current request."""


def get_path_params() -> PathParams:
    """Return the current request's path parameters.

    Raises ``LookupError`` if called outside a request context.
    """
    return path_params_var.get()


def get_path_param(name: str, default: str | None = None) -> str | None:
    """Return one path parameter, or *default* if it was not captured.

    Raises ``LookupError`` if called outside a request context.
    """
    return path_params_var.get().get(name, default)
