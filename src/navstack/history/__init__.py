"""History — the location source the navigator is layered on.

The ``History`` protocol is the only thing the core depends on.
``MemoryHistory`` is the bundled in-memory implementation.
"""

from navstack.history.events import ExitFinished, HistoryAction, HistoryEvent, NavigationEvent
from navstack.history.location import Location, LocationLike, parse_location
from navstack.history.memory import MemoryHistory
from navstack.history.protocol import History, HistoryListener

__all__ = [
    "ExitFinished",
    "History",
    "HistoryAction",
    "HistoryEvent",
    "HistoryListener",
    "Location",
    "LocationLike",
    "MemoryHistory",
    "NavigationEvent",
    "parse_location",
]
