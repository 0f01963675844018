"""Write a warren Response to an ASGI ``send`` callable."""

from warren._internal.asgi import Send
from warren.http.response import Response

# Informational, No Content and Not Modified never carry a body
_BODYLESS = frozenset({204, 304})


def _encode(name: str, value: str) -> tuple[bytes, bytes]:
    return name.lower().encode("latin-1"), value.encode("latin-1")


async def send_response(response: Response, send: Send) -> None:
    """Emit ``http.response.start`` then a single ``http.response.body``.

    Content-Length always reflects the bytes actually sent.
    """
    status = response.status
    body = b"" if status < 200 or status in _BODYLESS else response.body_bytes

    headers = [_encode(name, value) for name, value in response.headers]
    if response.content_type:
        headers.insert(0, _encode("content-type", response.content_type))
    headers.append(_encode("content-length", str(len(body))))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})
