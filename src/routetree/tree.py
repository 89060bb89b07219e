"""Typed route tree and its deserializer.

The raw tree is a nested mapping, usually read from a JSON file::

    {
        "/": "index",
        "/almanac": {
            "/": "almanac.index",
            "get,post/edit": ["common.require_login", "almanac.edit"]
        }
    }

``load_tree`` decides once, up front, what each node is. The compiler only
ever sees ``Binding`` and ``Group``.
"""

import json
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from routetree._internal.types import RawTree
from routetree.errors import MalformedRouteTree
from routetree.paths import join_path
from routetree.required import RequiredEntry, RequiredSpec

REQUIRED_KEY = "Required"


@dataclass(frozen=True, slots=True)
class Binding:
    """A leaf: one or more handler names, executed in order."""

    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Group:
    """A subtree whose key prefixes every descendant path."""

    children: tuple[tuple[str, "RouteNode"], ...] = ()
    required: RequiredSpec | None = None

    def __iter__(self) -> Iterator[tuple[str, "RouteNode"]]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


RouteNode: TypeAlias = Binding | Group


def load_tree(raw: RawTree, *, required_key: str = REQUIRED_KEY) -> Group:
    """Convert a raw nested mapping into a typed ``Group``.

    Raises ``MalformedRouteTree`` for any node that is not a name, a
    non-empty list of names, or a mapping.
    """
    if not isinstance(raw, Mapping):
        raise MalformedRouteTree("", f"route tree must be a mapping, got {type(raw).__name__}")
    return _load_group(raw, "", required_key)


def load_tree_file(path: str | Path, *, required_key: str = REQUIRED_KEY) -> Group:
    """Read a JSON route tree from *path*."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedRouteTree("", f"{path}: {exc}") from exc
    return load_tree(raw, required_key=required_key)


def _load_group(raw: Mapping[Any, Any], path: str, required_key: str) -> Group:
    children: list[tuple[str, RouteNode]] = []
    required: RequiredSpec | None = None

    for key, value in raw.items():
        if not isinstance(key, str):
            raise MalformedRouteTree(path, f"route key {key!r} is not a string")
        if key == required_key:
            required = _load_required(value, path)
            continue
        children.append((key, _load_node(value, join_path(path, key), required_key)))

    return Group(tuple(children), required)


def _load_node(value: Any, path: str, required_key: str) -> RouteNode:
    if isinstance(value, str):
        return Binding((value,))
    if isinstance(value, Mapping):
        return _load_group(value, path, required_key)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        if not value:
            raise MalformedRouteTree(path, "handler list is empty")
        if not all(isinstance(name, str) for name in value):
            raise MalformedRouteTree(path, "handler list must contain only names")
        return Binding(tuple(value))
    raise MalformedRouteTree(path, f"unsupported node of type {type(value).__name__}")


def _load_required(value: Any, path: str) -> RequiredSpec:
    if not isinstance(value, Mapping):
        raise MalformedRouteTree(path, "Required must be a mapping")

    unknown = set(value) - {"prefix", "postfix", "depth"}
    if unknown:
        raise MalformedRouteTree(path, f"unknown Required keys: {sorted(map(str, unknown))}")

    return RequiredSpec(
        prefix=_load_entries(value.get("prefix", ()), path),
        postfix=_load_entries(value.get("postfix", ()), path),
        depth=_load_depth(value.get("depth"), path),
    )


def _load_entries(value: Any, path: str) -> tuple[RequiredEntry, ...]:
    if isinstance(value, (str, Mapping)):
        value = [value]
    if not isinstance(value, Sequence):
        raise MalformedRouteTree(path, "Required prefix/postfix must be a list")

    entries: list[RequiredEntry] = []
    for item in value:
        if isinstance(item, str):
            entries.append(RequiredEntry(item))
        elif isinstance(item, Mapping) and isinstance(item.get("name"), str):
            # "depth": null means unbounded; leaving it out takes the group default
            explicit = "depth" in item
            entries.append(RequiredEntry(item["name"], _load_depth(item.get("depth"), path), explicit))
        else:
            raise MalformedRouteTree(path, f"invalid Required entry {item!r}")
    return tuple(entries)


def _load_depth(value: Any, path: str) -> int | None:
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedRouteTree(path, f"Required depth must be a non-negative integer, got {value!r}")
    return value
