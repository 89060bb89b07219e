"""routetree: declarative route trees with reverse URL generation.

Describe URLs as a nested mapping, bind each leaf to named handlers, and
build URLs back from those names.

Basic usage::

    from routetree import Router

    router = Router()
    router.register_routes(dispatcher, {
        "/": "index",
        "/social": {
            "Required": {"prefix": ["auth.require_login"]},
            "/": "social.index",
            "get,post/edit": "social.edit_profile",
        },
    }, controllers)

    router.get_url("social.edit_profile")   # "/social/edit"
"""

__version__ = "0.1.0"
__all__ = [
    "BoundRoute",
    "ConfigurationError",
    "Dispatcher",
    "HandlerNamespace",
    "InvalidMethod",
    "MalformedRouteTree",
    "MissingParameter",
    "RecordingDispatcher",
    "RouteTreeError",
    "Router",
    "RouterConfig",
    "UnknownHandler",
    "UnresolvedHandler",
    "get_url",
    "load_tree",
    "load_tree_file",
    "register_routes",
    "set_default_method",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routetree`` fast while providing a clean top-level API.
    """
    if name in ("Router", "register_routes", "get_url"):
        from routetree import router as _router

        return getattr(_router, name)

    if name == "RouterConfig":
        from routetree.config import RouterConfig

        return RouterConfig

    if name in ("Dispatcher", "BoundRoute", "RecordingDispatcher"):
        from routetree import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name == "HandlerNamespace":
        from routetree.namespace import HandlerNamespace

        return HandlerNamespace

    if name in ("load_tree", "load_tree_file"):
        from routetree import tree as _tree

        return getattr(_tree, name)

    if name == "set_default_method":
        from routetree.methods import set_default_method

        return set_default_method

    if name in (
        "ConfigurationError",
        "InvalidMethod",
        "MalformedRouteTree",
        "MissingParameter",
        "RouteTreeError",
        "UnknownHandler",
        "UnresolvedHandler",
    ):
        from routetree import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
