"""Reverse URL generation from a path table.

Templates use ``:name`` for required and ``:name?`` for optional
parameters::

    >>> table.record("user.show", "/users/:username/:tab?")
    >>> generate_url(table, "user.show", {"username": "ada"})
    '/users/ada'
    >>> generate_url(table, "user.show", {"username": "ada", "tab": "posts"})
    '/users/ada/posts'
"""

import re
from collections.abc import Mapping

from routetree.errors import MissingParameter
from routetree.paths import normalize_path
from routetree.table import PathTable

# ``:name`` or ``:name?``; the name is a run of word characters
PLACEHOLDER = re.compile(r":(\w+)(\?)?")


def placeholders(template: str) -> list[tuple[str, bool]]:
    """Return ``(name, optional)`` for each placeholder in *template*."""
    return [(m.group(1), m.group(2) is not None) for m in PLACEHOLDER.finditer(template)]


def expand(template: str, params: Mapping[str, object] | None = None) -> str:
    """Substitute *params* into *template*.

    Supplied parameters replace every matching placeholder. Optional
    placeholders without a value are dropped. Any ``:`` still in the
    result raises ``MissingParameter``, including one that came from a
    substituted value.
    """
    params = params or {}
    missing: list[str] = []

    def substitute(match: re.Match[str]) -> str:
        name, optional = match.group(1), match.group(2) is not None
        if name in params:
            return str(params[name])
        if optional:
            return ""
        missing.append(name)
        return match.group(0)

    path = PLACEHOLDER.sub(substitute, template)
    if missing or ":" in path:
        raise MissingParameter(path, tuple(dict.fromkeys(missing)))
    return normalize_path(path)


def generate_url(table: PathTable, name: str, params: Mapping[str, object] | None = None) -> str:
    """Build the URL for handler *name* from its recorded template.

    Raises ``UnknownHandler`` if *name* was never bound.
    """
    return expand(table.lookup(name), params)
