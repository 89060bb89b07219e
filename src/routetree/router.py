"""Router: registers route trees on a dispatcher and generates URLs.

Each Router owns its path table, so several routers can coexist::

    router = Router()
    router.register_routes(dispatcher, {
        "/": "index",
        "/users": {"/:username": "users.show"},
    }, namespace)
    router.freeze()
    router.get_url("users.show", {"username": "ada"})   # "/users/ada"

Register everything at startup, then freeze. URL generation only reads
the path table and is safe to share once the router is frozen.
"""

import logging
from collections.abc import Mapping
from typing import Any

from routetree._internal.types import RawTree
from routetree.compiler import TreeCompiler
from routetree.config import RouterConfig
from routetree.dispatch import BoundRoute, check_dispatcher
from routetree.errors import ConfigurationError
from routetree.namespace import HandlerNamespace
from routetree.table import PathTable
from routetree.tree import Group, load_tree
from routetree.urls import generate_url

logger = logging.getLogger("routetree.router")


class Router:
    """Compiles route trees and answers reverse URL lookups."""

    __slots__ = ("_routes", "_table", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig()
        self._table = PathTable()
        self._routes: list[BoundRoute] = []

    # -- Registration --

    def register_routes(
        self,
        dispatcher: object,
        tree: Group | RawTree,
        namespace: HandlerNamespace | Mapping[str, Any] | object,
    ) -> list[BoundRoute]:
        """Compile *tree* and bind every leaf on *dispatcher*.

        Args:
            dispatcher: Object with ``bind(method, path, handlers)``.
            tree: Raw nested mapping or an already loaded ``Group``.
            namespace: Where handler names are resolved.

        Returns:
            The bindings made by this call, in tree order.

        Raises:
            ConfigurationError: Bad dispatcher, or the router is frozen.
            MalformedRouteTree: Raised before anything is bound.
            UnresolvedHandler: Earlier leaves stay bound.
        """
        self._check_not_frozen()
        checked = check_dispatcher(dispatcher)
        if not isinstance(tree, Group):
            tree = load_tree(tree, required_key=self.config.required_key)

        compiler = TreeCompiler(
            checked,
            HandlerNamespace.coerce(namespace),
            self._table,
            default_method=self.config.default_method,
        )
        bound = compiler.compile(tree)
        self._routes.extend(bound)
        logger.info("Registered %d route binding(s), %d named path(s)", len(bound), len(self._table))
        return bound

    def freeze(self) -> None:
        """Mark registration complete. The path table becomes read-only."""
        self._table.freeze()

    @property
    def frozen(self) -> bool:
        return self._table.frozen

    def _check_not_frozen(self) -> None:
        if self._table.frozen:
            msg = (
                "Cannot register routes after the router is frozen. "
                "Register every route tree before calling freeze()."
            )
            raise ConfigurationError(msg)

    # -- Lookup --

    @property
    def paths(self) -> PathTable:
        return self._table

    @property
    def routes(self) -> list[BoundRoute]:
        """Every binding made by this router, in registration order."""
        return list(self._routes)

    def get_url(self, name: str, params: Mapping[str, object] | None = None) -> str:
        """Generate the URL for handler *name*.

        Raises ``UnknownHandler`` or ``MissingParameter``.
        """
        return generate_url(self._table, name, params)

    def url_for(self, name: str, /, **params: object) -> str:
        """Keyword form of ``get_url()``."""
        return generate_url(self._table, name, params)


# -- Module-level router for single-app use --

_default_router: Router | None = None


def default_router() -> Router:
    global _default_router
    if _default_router is None:
        _default_router = Router()
    return _default_router


def register_routes(
    dispatcher: object,
    tree: Group | RawTree,
    namespace: HandlerNamespace | Mapping[str, Any] | object,
) -> list[BoundRoute]:
    """``Router.register_routes()`` on the module-level router."""
    return default_router().register_routes(dispatcher, tree, namespace)


def get_url(name: str, params: Mapping[str, object] | None = None) -> str:
    """``Router.get_url()`` on the module-level router."""
    return default_router().get_url(name, params)
