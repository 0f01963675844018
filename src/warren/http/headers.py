"""Read-only, case-insensitive view over ASGI header pairs.

The byte pairs from the scope are kept untouched; names and values are
decoded as latin-1 only when looked up.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class Headers(Mapping[str, str]):
    """Request headers keyed by lowercased name.

    A repeated header reads as its first value through ``[]`` and
    ``get``; ``get_list`` returns every value in arrival order.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        object.__setattr__(self, "_raw", tuple((bytes(k), bytes(v)) for k, v in raw))

    def _values(self, name: str) -> Iterator[str]:
        wanted = name.lower().encode("latin-1")
        for key, value in self._raw:
            if key.lower() == wanted:
                yield value.decode("latin-1")

    def __getitem__(self, name: str) -> str:
        for value in self._values(name):
            return value
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and any(True for _ in self._values(name))

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(key.decode("latin-1").lower() for key, _ in self._raw))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __hash__(self) -> int:
        return hash(self._raw)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "Headers is immutable"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get(self, name: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """First value of header *name*, or *default*."""
        return next(self._values(name), default)

    def get_list(self, name: str) -> list[str]:
        """Every value of header *name*; empty if absent."""
        return list(self._values(name))

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The byte pairs exactly as the ASGI server sent them."""
        return self._raw
