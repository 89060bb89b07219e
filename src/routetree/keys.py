"""Route key parsing.

A leaf key may carry a method prefix::

    "get,post/login"   -> RouteKey({"get", "post"}, "/login")
    "DELETE/:id"       -> RouteKey({"delete"}, "/:id")
    "/social"          -> RouteKey({<default>}, "/social")

A prefix that is not a clean comma-separated list of known methods is not
an error: the whole key is then the path fragment.
"""

import re
from dataclasses import dataclass

from routetree.methods import METHODS, get_default_method

_METHOD_PREFIX = re.compile(r"^([A-Za-z,]+)/")


@dataclass(frozen=True, slots=True)
class RouteKey:
    """A parsed leaf key: the methods to bind and the path fragment."""

    methods: frozenset[str]
    fragment: str


def parse_route_key(key: str, default_method: str | None = None) -> RouteKey:
    """Split *key* into its method set and path fragment.

    Falls back to *default_method*, or the process-wide default when that
    is ``None``, if the key has no valid method prefix. The fragment keeps
    its leading ``/``.
    """
    match = _METHOD_PREFIX.match(key)
    if match is not None:
        names = match.group(1).lower().split(",")
        if all(name in METHODS for name in names):
            return RouteKey(frozenset(names), key[match.end(1) :])

    return RouteKey(frozenset({default_method or get_default_method()}), key)
