"""ASGI handler — translates ASGI scope/messages to warren types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through the routing tree, and
sends the Response back through ASGI send().
"""

from __future__ import annotations

import inspect
import logging
from contextvars import Token
from typing import TYPE_CHECKING, Any

from warren._internal.asgi import Receive, Scope, Send
from warren.context import path_params_var, request_var
from warren.errors import HTTPError
from warren.http.request import Request
from warren.http.response import NOT_FOUND, Response
from warren.routing.pattern import convert_param
from warren.routing.route import PathParams, RouteMatch
from warren.server.errors import handle_http_error, handle_internal_error
from warren.server.negotiation import negotiate
from warren.server.sender import send_response

if TYPE_CHECKING:
    from warren.routing.router import Router

logger = logging.getLogger("warren.server")


async def handle_request(scope: Scope, receive: Receive, send: Send, *, router: Router) -> None:
    """Process a single ASGI HTTP request through the routing tree."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = await router.handle(request)
    await send_response(response, send)


async def dispatch(router: Router, request: Request, *, debug: bool = False) -> Response:
    """Resolve *request* against *router* and run the matched handler.

    Path parameters are attached to the request and published through
    the request context for the duration of the handler call.
    """
    match = router.resolve(request.path)
    if match is None:
        logger.debug("404 %s %s", request.method, request.path)
        return NOT_FOUND

    request = request.with_path_params(match.path_params)
    token: Token[Request] = request_var.set(request)
    params_token: Token[PathParams] = path_params_var.set(match.path_params)
    try:
        result = await _invoke_handler(match, request)
        return negotiate(result)
    except HTTPError as exc:
        return handle_http_error(exc, request)
    except Exception as exc:
        return handle_internal_error(exc, request, debug=debug)
    finally:
        path_params_var.reset(params_token)
        request_var.reset(token)


async def _invoke_handler(match: RouteMatch, request: Request) -> Any:
    """Call the matched route handler with arguments built from its signature."""
    handler = match.route.handler
    kwargs = _build_handler_kwargs(handler, request, match)
    # Handlers may be def or async def
    result = handler(**kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def _build_handler_kwargs(handler: Any, request: Request, match: RouteMatch) -> dict[str, Any]:
    """Inspect handler signature and build kwargs from request + path params.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Path parameters (by name), converted through the annotation if
       there is one, else through the converter declared in the pattern
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}
    pattern = match.route.pattern

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in match.path_params:
            value = match.path_params[name]
            if param.annotation is not inspect.Parameter.empty:
                try:
                    kwargs[name] = param.annotation(value)
                except (ValueError, TypeError):
                    kwargs[name] = value
            else:
                kwargs[name] = convert_param(value, pattern.param_type(name) or "str")

    return kwargs
