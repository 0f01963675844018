"""Warren CLI — inspect a routing tree from the command line.

Entry point registered as ``warren`` in ``pyproject.toml``::

    [project.scripts]
    warren = "warren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``warren`` command."""
    parser = argparse.ArgumentParser(
        prog="warren",
        description="Warren — a hierarchical URL router for ASGI.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- warren routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List every leaf route")
    routes_parser.add_argument("router", help="Import string (e.g. myapp:app)")

    # -- warren resolve ---------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which route a path hits")
    resolve_parser.add_argument("router", help="Import string (e.g. myapp:app)")
    resolve_parser.add_argument("path", help="Request path (e.g. /users/42)")

    # -- warren reverse ---------------------------------------------------
    reverse_parser = subparsers.add_parser("reverse", help="Build a path from a route name")
    reverse_parser.add_argument("router", help="Import string (e.g. myapp:app)")
    reverse_parser.add_argument("name", help="Name chain (e.g. users:detail)")
    reverse_parser.add_argument("params", nargs="*", help="Parameters as key=value")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    from warren.cli._routes import run_resolve, run_reverse, run_routes

    if args.command == "routes":
        run_routes(args)
    elif args.command == "resolve":
        run_resolve(args)
    elif args.command == "reverse":
        run_reverse(args)
