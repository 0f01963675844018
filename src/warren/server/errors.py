"""Error handling for dispatched requests.

Maps HTTPError exceptions and unexpected handler failures to Response
objects. Routing misses never get here; they produce a bare 404.
"""

import logging
import traceback

from warren.errors import HTTPError
from warren.http.request import Request
from warren.http.response import Response

logger = logging.getLogger("warren.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError raised by a handler to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    response = Response(body=detail, status=exc.status, content_type="text/plain; charset=utf-8")
    return response.with_headers(exc.headers)


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        body = "".join(traceback.format_exception(exc))
        return Response(body=body, status=500, content_type="text/plain; charset=utf-8")

    return Response(body="Internal Server Error", status=500, content_type="text/plain; charset=utf-8")
