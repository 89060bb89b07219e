"""Required middleware: prefix/postfix handler names inherited down the tree.

A group may declare handler names that every binding beneath it receives
before (prefix) or after (postfix) its own handlers::

    "/admin": {
        "Required": {"prefix": ["auth.require_login"], "depth": 1},
        "/": "admin.index",
        "/users": {"/": "admin.users"},
    }

Each entry carries a remaining depth. Bindings directly in the declaring
group see entries with depth 0 or more; every further level down costs one.
``None`` means unbounded.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RequiredEntry:
    """A required handler name tagged with its remaining depth.

    ``explicit`` marks an entry whose ``depth`` was written out, so an
    explicit ``None`` stays unbounded instead of taking the group default.
    """

    name: str
    depth: int | None = None
    explicit: bool = field(default=False, compare=False)

    def descend(self) -> "RequiredEntry | None":
        """Return this entry one level deeper, or ``None`` once exhausted."""
        if self.depth is None:
            return self
        if self.depth - 1 < 0:
            return None
        return RequiredEntry(self.name, self.depth - 1, explicit=True)


@dataclass(frozen=True, slots=True)
class RequiredSpec:
    """Prefix and postfix entries visible at one level of the tree.

    ``depth`` is the default given to entries declared without their own;
    it is applied when the entry is introduced and never re-read.
    """

    prefix: tuple[RequiredEntry, ...] = ()
    postfix: tuple[RequiredEntry, ...] = ()
    depth: int | None = None

    @property
    def prefix_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.prefix)

    @property
    def postfix_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.postfix)

    def __bool__(self) -> bool:
        return bool(self.prefix or self.postfix)


EMPTY = RequiredSpec()


def _descend_all(entries: Iterable[RequiredEntry]) -> tuple[RequiredEntry, ...]:
    descended = (entry.descend() for entry in entries)
    return tuple(entry for entry in descended if entry is not None)


def _introduce(entries: Iterable[RequiredEntry], default: int | None) -> tuple[RequiredEntry, ...]:
    return tuple(
        entry
        if entry.depth is not None or entry.explicit
        else RequiredEntry(entry.name, default, explicit=True)
        for entry in entries
    )


def propagate(inherited: RequiredSpec, own: RequiredSpec | None = None) -> RequiredSpec:
    """Combine the parent level's spec with a group's own declaration.

    Inherited entries move one level down and drop out when their depth
    runs out. Prefix order is ancestors first; postfix order is the group's
    own entries first, then the ancestors'.
    """
    prefix = _descend_all(inherited.prefix)
    postfix = _descend_all(inherited.postfix)
    if own is None:
        return RequiredSpec(prefix, postfix)

    return RequiredSpec(
        prefix=prefix + _introduce(own.prefix, own.depth),
        postfix=_introduce(own.postfix, own.depth) + postfix,
    )
