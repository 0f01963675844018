"""Outgoing response value produced by dispatch."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers and body of one response.

    ``content_type=""`` means no Content-Type header is sent. Headers
    added through ``with_header``/``with_headers`` are appended, so a
    name may repeat.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return self.with_headers([(name, value)])

    def with_headers(self, pairs: Iterable[tuple[str, str]]) -> Response:
        return replace(self, headers=self.headers + tuple(pairs))

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 when it was given as text."""
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body


NOT_FOUND = Response(body=b"", status=404, content_type="")
"""Sent when nothing in the tree matches: a status line and nothing else."""
