"""Route tree compiler.

Walks a typed route tree depth-first, binds every leaf on the dispatcher,
and records each handler name's path in the path table.

Compilation is not transactional. If a leaf fails to resolve, the leaves
bound before it stay bound; treat any error here as fatal at startup.
"""

import logging

from routetree._internal.types import Handler
from routetree.dispatch import BoundRoute, Dispatcher
from routetree.errors import UnknownHandler, UnresolvedHandler
from routetree.keys import parse_route_key
from routetree.methods import ordered
from routetree.namespace import HandlerNamespace
from routetree.paths import join_path
from routetree.required import EMPTY, RequiredSpec, propagate
from routetree.table import PathTable
from routetree.tree import Binding, Group

logger = logging.getLogger("routetree.compiler")


class TreeCompiler:
    """Compiles one route tree against one namespace.

    Usage::

        compiler = TreeCompiler(dispatcher, namespace, table)
        bound = compiler.compile(load_tree(raw))
    """

    __slots__ = ("_bound", "_default_method", "_dispatcher", "_namespace", "_table")

    def __init__(
        self,
        dispatcher: Dispatcher,
        namespace: HandlerNamespace,
        table: PathTable,
        *,
        default_method: str | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._namespace = namespace
        self._table = table
        self._default_method = default_method
        self._bound: list[BoundRoute] = []

    def compile(self, tree: Group) -> list[BoundRoute]:
        """Bind every leaf of *tree*. Returns the bindings made, in order."""
        self._walk_group(tree, "", EMPTY)
        return list(self._bound)

    def _walk_group(self, group: Group, path: str, inherited: RequiredSpec) -> None:
        required = propagate(inherited, group.required)
        if group.required:
            logger.debug(
                "Required at %s: prefix=%s postfix=%s",
                path or "/",
                required.prefix_names,
                required.postfix_names,
            )

        for key, node in group:
            if isinstance(node, Group):
                self._walk_group(node, join_path(path, key), required)
            else:
                self._bind(key, node, path, required)

    def _bind(self, key: str, binding: Binding, path: str, required: RequiredSpec) -> None:
        route_key = parse_route_key(key, self._default_method)
        route_path = join_path(path, route_key.fragment)
        names = required.prefix_names + binding.names + required.postfix_names

        for name in names:
            self._table.record(name, route_path)

        handlers = tuple(self._resolve(name, route_path) for name in names)

        for method in ordered(route_key.methods):
            logger.debug("bind %s %s -> %s", method.upper(), route_path, ", ".join(names))
            self._dispatcher.bind(method, route_path, handlers)
            self._bound.append(BoundRoute(method, route_path, handlers, names))

    def _resolve(self, name: str, path: str) -> Handler:
        try:
            return self._namespace.resolve(name)
        except UnknownHandler as exc:
            raise UnresolvedHandler(name, path, exc.detail) from exc
