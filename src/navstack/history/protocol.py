"""History port protocol.

A history port is any object matching ``History``. No base class
required. The navigator only talks to the port, so browser bindings or
any other location source stay outside the core.

Contract: every successful ``push``/``replace``/``pop``/``go`` emits
exactly one matching event to subscribers with accurate ``from_``/``to``
locations. ``pop()`` and ``go(n)`` with ``n < 0`` emit ``POP``, even when
the underlying source has no native back event.
"""

from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

from navstack._internal.types import Unsubscribe
from navstack.history.events import HistoryEvent
from navstack.history.location import Location, LocationLike

HistoryListener: TypeAlias = Callable[[HistoryEvent], None]


@runtime_checkable
class History(Protocol):
    """Linear location history the navigator is layered on."""

    def push(self, to: LocationLike) -> None: ...

    def pop(self) -> None: ...

    def replace(self, to: LocationLike) -> None: ...

    def go(self, delta: int) -> None: ...

    def subscribe(self, listener: HistoryListener) -> Unsubscribe: ...

    def get_current_location(self) -> Location: ...
