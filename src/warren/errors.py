"""Warren exception hierarchy.

Lookup misses in ``resolve``/``reverse`` are reported as ``None``, not
raised. These types cover invalid wiring, the raising convenience
lookups, and HTTP errors surfaced by handlers.
"""

from dataclasses import dataclass


class WarrenError(Exception):
    """Base for all warren-specific errors."""


class ConfigurationError(WarrenError):
    """Raised when a route pattern or resolver name is invalid.

    Always raised at wiring time, never while serving.
    """


class NoReverseMatch(WarrenError, LookupError):  # noqa: N818 — mirrors NotFound naming
    """Raised by ``Router.url_for`` when a name cannot be reversed."""


@dataclass(frozen=True, slots=True)
class HTTPError(WarrenError):
    """An error that maps directly to an HTTP status code.

    Raised by ``Router.match`` or by handlers. ``Router.handle`` catches
    these and turns them into a response with the same status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
