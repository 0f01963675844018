"""Tests for warren.http — request, response and the ASGI sender."""

from typing import Any

import pytest

from warren.http.headers import Headers
from warren.http.request import Request
from warren.http.response import NOT_FOUND, Response
from warren.routing.route import PathParams
from warren.server.sender import send_response


def _scope(**overrides: object) -> dict[str, Any]:
    base: dict[str, Any] = {
        "type": "http",
        "method": "GET",
        "path": "/users/42",
        "headers": [(b"content-type", b"application/json"), (b"x-tag", b"a"), (b"X-Tag", b"b")],
        "query_string": b"q=1",
        "http_version": "1.1",
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 5000),
    }
    base.update(overrides)
    return base


class TestRequest:
    def test_from_asgi(self) -> None:
        request = Request.from_asgi(_scope())
        assert request.method == "GET"
        assert request.path == "/users/42"
        assert request.content_type == "application/json"
        assert request.query_string == b"q=1"
        assert request.server == ("localhost", 8000)
        assert request.path_params == {}

    def test_headers_wrap_scope_pairs(self) -> None:
        request = Request.from_asgi(_scope())
        assert isinstance(request.headers, Headers)
        assert request.headers["X-TAG"] == "a"
        assert request.headers.get_list("x-tag") == ["a", "b"]
        assert request.headers.get("missing") is None

    def test_build_has_no_headers(self) -> None:
        request = Request.build("/")
        assert len(request.headers) == 0
        assert request.content_type is None

    def test_with_path_params(self) -> None:
        request = Request.from_asgi(_scope())
        updated = request.with_path_params(PathParams({"id": "42"}))
        assert updated.path_params == {"id": "42"}
        assert request.path_params == {}
        assert updated._cache is request._cache

    def test_frozen(self) -> None:
        request = Request.build("/")
        with pytest.raises(AttributeError):
            request.path = "/other"  # type: ignore[misc]

    async def test_body_read_once(self) -> None:
        calls = 0

        async def receive() -> dict[str, Any]:
            nonlocal calls
            calls += 1
            return {"type": "http.request", "body": b'{"a": 1}', "more_body": False}

        request = Request.from_asgi(_scope(), receive)
        assert await request.json() == {"a": 1}
        assert await request.text() == '{"a": 1}'
        assert calls == 1

    async def test_body_without_receive(self) -> None:
        assert await Request.build("/").body() == b""


class TestResponse:
    def test_chainable(self) -> None:
        response = Response("hi").with_status(201).with_header("X-A", "1")
        assert response.status == 201
        assert response.headers == (("X-A", "1"),)

    def test_with_headers_appends_pairs(self) -> None:
        response = Response("hi").with_header("Vary", "a").with_headers({"Vary": "b"}.items())
        assert response.headers == (("Vary", "a"), ("Vary", "b"))

    def test_body_conversions(self) -> None:
        assert Response("hé").body_bytes == "hé".encode()
        assert Response(b"hi").text == "hi"

    def test_not_found_is_bare(self) -> None:
        assert NOT_FOUND.status == 404
        assert NOT_FOUND.body == b""
        assert NOT_FOUND.content_type == ""


class TestSendResponse:
    async def _capture(self, response: Response) -> list[dict[str, Any]]:
        sent: list[dict[str, Any]] = []

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await send_response(response, send)
        return sent

    async def test_not_found_has_no_content_type(self) -> None:
        start, body = await self._capture(NOT_FOUND)
        assert start["status"] == 404
        assert start["headers"] == [(b"content-length", b"0")]
        assert body["body"] == b""

    async def test_headers_lowercased(self) -> None:
        start, body = await self._capture(Response("ok").with_header("X-Trace", "abc"))
        assert (b"x-trace", b"abc") in start["headers"]
        assert (b"content-type", b"text/html; charset=utf-8") in start["headers"]
        assert body["body"] == b"ok"

    async def test_no_body_for_204(self) -> None:
        _, body = await self._capture(Response("ignored", status=204))
        assert body["body"] == b""
