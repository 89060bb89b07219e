"""Shared type aliases used across routetree modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Route handler: opaque callable owned by the dispatcher's middleware contract
Handler: TypeAlias = Callable[..., Any]

# Raw route tree as loaded from JSON or written as a literal
RawTree: TypeAlias = Mapping[str, Any]
