"""routetree exception hierarchy.

Shared across the parser, compiler, resolver, and URL generator so every
module raises and catches the same types.
"""


class RouteTreeError(Exception):
    """Base for all routetree-specific errors."""


class ConfigurationError(RouteTreeError):
    """Raised when routing configuration is invalid.

    Typically raised during ``Router.register_routes()`` at startup.
    """


class InvalidMethod(ConfigurationError):  # noqa: N818
    """An HTTP method name outside get, post, put, delete, all."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"Invalid HTTP method name {method!r}. Should be one of: get, post, put, delete, or all."
        )


class MalformedRouteTree(ConfigurationError):  # noqa: N818
    """A route tree node is neither a name, a list of names, nor a group."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid route definition at {path or '/'!r}: {detail}")


class UnknownHandler(RouteTreeError, LookupError):  # noqa: N818
    """A symbolic handler name does not resolve."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        message = f"Invalid handler requested: {name!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnresolvedHandler(UnknownHandler):
    """A name bound in the route tree is missing from the handler namespace."""

    def __init__(self, name: str, path: str, detail: str = "") -> None:
        self.path = path
        where = f"bound at {path!r}"
        super().__init__(name, f"{where}: {detail}" if detail else where)


class MissingParameter(RouteTreeError):  # noqa: N818
    """URL generation left required ``:param`` placeholders unresolved."""

    def __init__(self, path: str, missing: tuple[str, ...] = ()) -> None:
        self.path = path
        self.missing = missing
        super().__init__(f"Missing required parameter(s): {path}")
