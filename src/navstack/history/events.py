"""Navigation event types.

``HistoryEvent`` is emitted by a history port for every location change.
``ExitFinished`` is emitted by the rendering layer once a popped screen
has finished animating out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from navstack.history.location import Location


class HistoryAction(Enum):
    """Kind of location change reported by a history port."""

    PUSH = "PUSH"
    POP = "POP"
    REPLACE = "REPLACE"


@dataclass(frozen=True, slots=True)
class HistoryEvent:
    """A single location change, with the location it left and reached."""

    type: HistoryAction
    from_: Location
    to: Location


@dataclass(frozen=True, slots=True)
class ExitFinished:
    """The UI finished the exit transition of popped activities."""


NavigationEvent: TypeAlias = HistoryEvent | ExitFinished
