"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass

from routetree.methods import normalize_method
from routetree.tree import REQUIRED_KEY


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    Override what you need::

        config = RouterConfig(default_method="post")
    """

    # Method for keys without a method prefix (None = process-wide default)
    default_method: str | None = None

    # Group key holding the required prefix/postfix declaration
    required_key: str = REQUIRED_KEY

    def __post_init__(self) -> None:
        if self.default_method is not None:
            object.__setattr__(self, "default_method", normalize_method(self.default_method))
