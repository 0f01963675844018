"""Immutable HTTP request.

Frozen metadata with async body access. Path parameters ride on the
request itself as a typed ``PathParams`` bag, set once the router has
found the leaf route.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncIterator
from dataclasses import dataclass, field, replace
from typing import Any

from warren._internal.asgi import Receive
from warren.http.headers import Headers
from warren.routing.route import PathParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, path, headers, etc.) is frozen at creation.
    Body is accessed asynchronously via ``.body()``, ``.text()``, ``.json()``.
    The query string is carried raw; warren does not parse it.
    """

    method: str
    path: str
    headers: Headers
    path_params: PathParams
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None
    query_string: bytes = b""

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    # Private: mutable cache for the body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    def with_path_params(self, path_params: PathParams) -> Request:
        """Return a copy carrying *path_params*; the body cache is shared."""
        return replace(self, path_params=path_params, _cache=self._cache)

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncIterator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON."""
        raw = await self.body()
        return json_module.loads(raw)

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    # -- Factories --

    @classmethod
    def from_asgi(
        cls,
        scope: dict[str, Any],
        receive: Receive | None = None,
        path_params: PathParams | None = None,
    ) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope.get("method", "GET"),
            path=scope["path"],
            headers=Headers(scope.get("headers", ())),
            path_params=path_params or PathParams(),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            query_string=scope.get("query_string", b""),
            _receive=receive,
        )

    @classmethod
    def build(cls, path: str, method: str = "GET") -> Request:
        """Create a bodiless request for *path*, outside any server."""
        return cls.from_asgi({"type": "http", "method": method, "path": path})
