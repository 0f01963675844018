"""Router import resolution — resolves ``"module:attribute"`` strings to Router instances.

Shared utility used by every ``warren`` subcommand.
"""

import importlib

from warren.routing.router import Router


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a warren Router instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Supports factory functions: if the resolved object is callable and
    not a Router instance, it will be called.

    Raises:
        ImportError: If the module, or something it imports, cannot be imported.
        SyntaxError: If the module source does not compile.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Router or a factory for one.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # A Router is itself callable (ASGI), so check the type first
    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a warren.Router instance"
        raise TypeError(msg)

    return obj
