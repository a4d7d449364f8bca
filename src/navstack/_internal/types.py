"""Shared type aliases used across navstack modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Component reference attached to a route, opaque to navstack
Render: TypeAlias = Any

# Returned by every subscribe(); calling it detaches the listener
Unsubscribe: TypeAlias = Callable[[], None]
