"""Shared CLI plumbing: namespace import and route compilation.

Used by ``routetree routes`` and ``routetree url``.
"""

import argparse
import importlib
import sys

from routetree.config import RouterConfig
from routetree.dispatch import RecordingDispatcher
from routetree.errors import RouteTreeError
from routetree.router import Router
from routetree.tree import load_tree_file


def resolve_namespace(import_string: str) -> object:
    """Resolve an import string to a handler namespace.

    Accepts ``"module"`` (the module itself is the namespace) or
    ``"module:attribute"``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    if not attr_name:
        return module
    return getattr(module, attr_name)


def compile_from_args(args: argparse.Namespace) -> Router:
    """Build a router from ``args.tree`` and ``args.handlers``.

    Prints ``Error: ...`` and exits 1 on any import or configuration error.
    """
    try:
        namespace = resolve_namespace(args.handlers)
        router = Router(RouterConfig(default_method=args.default_method))
        tree = load_tree_file(args.tree, required_key=router.config.required_key)
        router.register_routes(RecordingDispatcher(), tree, namespace)
    except (ModuleNotFoundError, AttributeError, OSError, RouteTreeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    router.freeze()
    return router
