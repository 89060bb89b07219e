"""Dispatcher protocol: the collaborator that receives compiled bindings.

A dispatcher is any object with a ``bind`` method::

    class FlaskDispatcher:
        def __init__(self, app):
            self.app = app

        def bind(self, method, path, handlers):
            ...

No base class required. The compiler checks the shape, not the lineage.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from routetree._internal.types import Handler
from routetree.errors import ConfigurationError


@runtime_checkable
class Dispatcher(Protocol):
    """Receives one call per (binding, method) pair.

    *handlers* holds at least one callable; the dispatcher runs them in
    order under its own middleware contract.
    """

    def bind(self, method: str, path: str, handlers: tuple[Handler, ...]) -> None: ...


@dataclass(frozen=True, slots=True)
class BoundRoute:
    """One binding as the dispatcher received it."""

    method: str
    path: str
    handlers: tuple[Handler, ...]
    names: tuple[str, ...] = ()


class RecordingDispatcher:
    """Dispatcher that keeps every binding in order.

    Useful for tests and for listing a compiled tree without a server.
    """

    __slots__ = ("routes",)

    def __init__(self) -> None:
        self.routes: list[BoundRoute] = []

    def bind(self, method: str, path: str, handlers: tuple[Handler, ...]) -> None:
        self.routes.append(BoundRoute(method, path, tuple(handlers)))

    def find(self, method: str, path: str) -> BoundRoute | None:
        for route in reversed(self.routes):
            if route.method == method and route.path == path:
                return route
        return None


def check_dispatcher(dispatcher: object) -> Dispatcher:
    """Return *dispatcher* if it has a callable ``bind``.

    Raises ``ConfigurationError`` otherwise.
    """
    if not callable(getattr(dispatcher, "bind", None)):
        msg = (
            f"{type(dispatcher).__name__} is not a dispatcher: "
            "expected a bind(method, path, handlers) method."
        )
        raise ConfigurationError(msg)
    return dispatcher  # type: ignore[return-value]
