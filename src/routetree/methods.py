"""HTTP method vocabulary and the process-wide default method.

Route keys and ``set_default_method()`` accept the same fixed, case-insensitive
set of names. ``all`` is passed through to the dispatcher untouched; what it
means is the dispatcher's business.
"""

from routetree.errors import InvalidMethod

# Dispatch order when a key names several methods
METHODS: tuple[str, ...] = ("get", "post", "put", "delete", "all")

_default_method = "get"


def normalize_method(method: str) -> str:
    """Return the lower-cased method name.

    Raises ``InvalidMethod`` if *method* is not in ``METHODS``.
    """
    if not isinstance(method, str) or method.lower() not in METHODS:
        raise InvalidMethod(str(method))
    return method.lower()


def set_default_method(method: str) -> None:
    """Set the method used for route keys without a method prefix."""
    global _default_method
    _default_method = normalize_method(method)


def get_default_method() -> str:
    return _default_method


def ordered(methods: frozenset[str]) -> tuple[str, ...]:
    """Sort a method set into ``METHODS`` order."""
    return tuple(m for m in METHODS if m in methods)
