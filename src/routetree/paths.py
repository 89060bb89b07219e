"""Path joining and normalization for route templates.

Paths are absolute, ``/``-separated, and keep ``:param`` / ``:param?``
placeholders as opaque segment text.
"""

import re

_SLASHES = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Normalize a route path.

    Collapses repeated slashes, resolves ``.`` and ``..`` segments, makes
    the path absolute, and drops the trailing slash. The root stays ``/``.

    Examples::

        "/almanac/"       -> "/almanac"
        "//a//b"          -> "/a/b"
        "a/./b/../c"      -> "/a/c"
        ""                -> "/"
    """
    parts: list[str] = []
    for part in _SLASHES.sub("/", path).split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return "/" + "/".join(parts)


def join_path(base: str, fragment: str) -> str:
    """Join *fragment* under *base*, treating a leading ``/`` as relative.

    ``join_path("/social", "/find")`` is ``/social/find``, and an empty
    fragment yields *base* itself.
    """
    return normalize_path(f"{base}/{fragment}")
