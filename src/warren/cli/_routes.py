"""``warren routes``, ``warren resolve`` and ``warren reverse``.

Each command resolves an import string to a Router and inspects it
without serving any traffic.
"""

import argparse
import sys

from warren.cli._resolve import resolve_router
from warren.routing.router import Router


def _load(import_string: str) -> Router:
    try:
        return resolve_router(import_string)
    except (ImportError, SyntaxError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _handler_name(handler: object) -> str:
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", str(handler))


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of NAME, PATH and HANDLER for every leaf route."""
    router = _load(args.router)

    routes = list(router.iter_routes())
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for info in routes:
        handler_name = _handler_name(info.route.handler)
        if info.is_default:
            handler_name = f"{handler_name} (default)"
        rows.append((info.name or "-", info.path, handler_name))

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "HANDLER"))
    sep_len = max_name + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for name, path, handler_name in rows:
        print(fmt.format(name, path, handler_name))


def run_resolve(args: argparse.Namespace) -> None:
    """Print the route a path resolves to, and its captured parameters."""
    router = _load(args.router)

    match = router.resolve(args.path)
    if match is None:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"route:   {match.route.name or '-'} ({match.route.path})")
    print(f"handler: {_handler_name(match.route.handler)}")
    for key, value in match.path_params.items():
        print(f"  {key} = {value}")


def run_reverse(args: argparse.Namespace) -> None:
    """Print the path a name chain reverses to."""
    router = _load(args.router)

    params: dict[str, str] = {}
    for pair in args.params:
        key, sep, value = pair.partition("=")
        if not sep:
            print(f"Error: expected key=value, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        params[key] = value

    path = router.reverse(args.name, params)
    if path is None:
        print(f"Cannot reverse {args.name!r}", file=sys.stderr)
        raise SystemExit(1)
    print(path)
