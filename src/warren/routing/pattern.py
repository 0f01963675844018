"""Route path patterns.

A pattern is a path template such as ``/users/{id:int}/posts/{slug}``.
It is parsed once into segments and compiled into a single anchored
regex with one named group per parameter. The same segments drive
``format()`` for reverse lookup.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from warren.errors import ConfigurationError

# (regex, python type) per converter. A converter only constrains what a
# segment matches; captured values are handed out as strings.
# ``path`` is lazy so the optional trailing slash stays out of the capture.
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
    "float": (r"\d+(?:\.\d+)?", float),
    "path": (r".+?", str),
}


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert a captured parameter string to its converter's Python type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    return target_type(value)


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"          -> [PathSegment("users")]
        "/users/{id}"     -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}" -> [PathSegment("{id:int}", is_param=True, param_type="int")]
        "/files/{path:path}" -> [PathSegment("{path:path}", is_param=True, param_type="path")]

    Raises ``ConfigurationError`` for ``<param>`` placeholders, unknown
    converters, invalid, duplicate or reserved (``request``) parameter
    names, and a ``path`` parameter that is not the last segment.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route path {path!r} uses a <param> placeholder. "
                "Warren expects {param} (e.g. /users/{id})."
            )
            raise ConfigurationError(msg)
        if not (part.startswith("{") and part.endswith("}")):
            segments.append(PathSegment(value=part))
            continue

        inner = part[1:-1]
        if ":" in inner:
            param_name, param_type = inner.split(":", 1)
        else:
            param_name = inner
            param_type = "str"

        if not param_name.isidentifier():
            msg = f"Invalid parameter name {param_name!r} in route path {path!r}"
            raise ConfigurationError(msg)
        if param_type not in CONVERTERS:
            known = ", ".join(sorted(CONVERTERS))
            msg = f"Unknown converter {param_type!r} in route path {path!r} (known: {known})"
            raise ConfigurationError(msg)
        if param_name == "request":
            msg = f"Parameter name 'request' is reserved for the handler's Request in route path {path!r}"
            raise ConfigurationError(msg)
        if param_name in seen:
            msg = f"Duplicate parameter {param_name!r} in route path {path!r}"
            raise ConfigurationError(msg)
        seen.add(param_name)
        segments.append(
            PathSegment(
                value=part,
                is_param=True,
                param_name=param_name,
                param_type=param_type,
            )
        )

    for seg in segments[:-1]:
        if seg.param_type == "path":
            msg = f"A {{name:path}} parameter must be last in route path {path!r}"
            raise ConfigurationError(msg)
    return segments


def _compile(segments: list[PathSegment]) -> re.Pattern[str]:
    if not segments:
        return re.compile(r"^/$")
    pieces: list[str] = []
    for seg in segments:
        if seg.is_param:
            pattern, _ = CONVERTERS[seg.param_type]
            pieces.append(f"/(?P<{seg.param_name}>{pattern})")
        else:
            pieces.append("/" + re.escape(seg.value))
    # A trailing slash is tolerated so leaves can be resolved directly
    return re.compile("^" + "".join(pieces) + "/?$")


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled route path template.

    Usage::

        pattern = PathPattern.compile("/users/{id:int}")
        pattern.match("/users/42")          # {"id": "42"}
        pattern.format({"id": "7"})         # "/users/7"
    """

    template: str
    segments: tuple[PathSegment, ...]
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, template: str) -> "PathPattern":
        segments = parse_path(template)
        return cls(template=template, segments=tuple(segments), regex=_compile(segments))

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of every parameter, in path order."""
        return tuple(seg.param_name for seg in self.segments if seg.param_name)

    def param_type(self, name: str) -> str | None:
        """Converter name declared for parameter *name*, or ``None``."""
        for seg in self.segments:
            if seg.param_name == name:
                return seg.param_type
        return None

    def match(self, path: str) -> dict[str, str] | None:
        """Return captured parameters, or ``None`` if *path* does not match."""
        m = self.regex.match(path)
        if m is None:
            return None
        return m.groupdict()

    def format(self, params: Mapping[str, object]) -> str | None:
        """Build a path from *params*.

        Values are inserted with ``str()`` as-is. Returns ``None`` when a
        required parameter is missing; extra keys are ignored.
        """
        parts: list[str] = []
        for seg in self.segments:
            if not seg.is_param:
                parts.append(seg.value)
                continue
            if seg.param_name not in params:
                return None
            parts.append(str(params[seg.param_name]))
        return "/" + "/".join(parts)
