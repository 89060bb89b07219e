"""Handler namespace: dotted names to handler callables.

The namespace is assembled by the caller: a nested dict, an imported
module, a class with static handlers, or any mix of these::

    namespace = HandlerNamespace({
        "index": index,
        "social": social_controllers,   # a module
        "common": {"require_login": require_login},
    })
    namespace.resolve("social.edit_profile")
"""

from collections.abc import Mapping
from typing import Any

from routetree._internal.types import Handler
from routetree.errors import UnknownHandler


class HandlerNamespace:
    """Read-only view over a tree of handlers addressed by dotted names."""

    __slots__ = ("_root",)

    def __init__(self, root: Mapping[str, Any] | object) -> None:
        self._root = root

    @classmethod
    def coerce(cls, namespace: "HandlerNamespace | Mapping[str, Any] | object") -> "HandlerNamespace":
        """Wrap *namespace* unless it already is a ``HandlerNamespace``."""
        if isinstance(namespace, HandlerNamespace):
            return namespace
        return cls(namespace)

    def resolve(self, name: str) -> Handler:
        """Walk the namespace one dotted segment at a time.

        Raises ``UnknownHandler`` on the first segment that does not exist,
        or if the final object is not callable.
        """
        node: Any = self._root
        for segment in name.split("."):
            node = _lookup(node, segment, name)

        if not callable(node):
            raise UnknownHandler(name, f"{type(node).__name__} is not callable")
        return node

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.resolve(name)
        except UnknownHandler:
            return False
        return True


def _lookup(node: Any, segment: str, name: str) -> Any:
    if not segment:
        raise UnknownHandler(name, "empty name segment")
    if isinstance(node, Mapping):
        if segment in node:
            return node[segment]
    elif not segment.startswith("_") and hasattr(node, segment):
        return getattr(node, segment)
    raise UnknownHandler(name, f"no {segment!r}")
