"""Path table: symbolic handler name to the path it was last bound at."""

from collections.abc import Iterator

from routetree.errors import ConfigurationError, UnknownHandler


class PathTable:
    """Mapping of handler names to path templates, owned by one router.

    Binding the same name twice is not an error: the later path wins.
    Once frozen, the table is read-only.
    """

    __slots__ = ("_frozen", "_paths")

    def __init__(self) -> None:
        self._paths: dict[str, str] = {}
        self._frozen = False

    def record(self, name: str, path: str) -> None:
        if self._frozen:
            msg = f"Cannot record {name!r}: path table is frozen."
            raise ConfigurationError(msg)
        self._paths[name] = path

    def lookup(self, name: str) -> str:
        """Return the template for *name*. Raises ``UnknownHandler``."""
        try:
            return self._paths[name]
        except KeyError:
            raise UnknownHandler(name) from None

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def items(self) -> list[tuple[str, str]]:
        return list(self._paths.items())
