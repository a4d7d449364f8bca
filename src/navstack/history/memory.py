"""In-memory history port.

Keeps a list of locations plus a cursor, the way a browser session
history does. Useful for tests, scripted flows, and non-browser hosts.
"""

import logging

from navstack._internal.types import Unsubscribe
from navstack.history.events import HistoryAction, HistoryEvent
from navstack.history.location import Location, LocationLike, parse_location
from navstack.history.protocol import HistoryListener

logger = logging.getLogger("navstack.history")


class MemoryHistory:
    """History port backed by a Python list.

    Usage::

        history = MemoryHistory("/")
        history.push("/funnel/name")
        history.go(-1)
        history.get_current_location().pathname  # "/"
    """

    __slots__ = ("_cursor", "_entries", "_listeners")

    def __init__(self, initial_path: LocationLike = "/") -> None:
        self._entries: list[Location] = [parse_location(initial_path)]
        self._cursor = 0
        self._listeners: list[HistoryListener] = []

    @property
    def entries(self) -> tuple[Location, ...]:
        """Every stored location, oldest first (forward entries included)."""
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        """Position of the current location in ``entries``."""
        return self._cursor

    def get_current_location(self) -> Location:
        return self._entries[self._cursor]

    def push(self, to: LocationLike) -> None:
        """Append a location, dropping any forward entries."""
        origin = self.get_current_location()
        target = parse_location(to, origin)
        del self._entries[self._cursor + 1 :]
        self._entries.append(target)
        self._cursor += 1
        self._emit(HistoryEvent(HistoryAction.PUSH, origin, target))

    def pop(self) -> None:
        """Step back one entry. Silent at the first entry."""
        if self._cursor == 0:
            logger.debug("pop ignored: already at the first entry")
            return
        origin = self.get_current_location()
        self._cursor -= 1
        self._emit(HistoryEvent(HistoryAction.POP, origin, self.get_current_location()))

    def replace(self, to: LocationLike) -> None:
        """Overwrite the current entry."""
        origin = self.get_current_location()
        target = parse_location(to, origin)
        self._entries[self._cursor] = target
        self._emit(HistoryEvent(HistoryAction.REPLACE, origin, target))

    def go(self, delta: int) -> None:
        """Move the cursor by *delta*, clamped to the stored entries.

        Emits one ``POP`` when the cursor actually moved, like a browser's
        ``popstate`` for both back and forward traversal.
        """
        if delta == 0:
            return
        target_cursor = min(max(self._cursor + delta, 0), len(self._entries) - 1)
        if target_cursor == self._cursor:
            return
        origin = self.get_current_location()
        self._cursor = target_cursor
        self._emit(HistoryEvent(HistoryAction.POP, origin, self.get_current_location()))

    def subscribe(self, listener: HistoryListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: HistoryEvent) -> None:
        for listener in tuple(self._listeners):
            listener(event)
