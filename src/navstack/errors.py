"""Navstack exception hierarchy.

Shared across the reducer, the navigator, and the config layer so every
module raises and catches the same types.

Navigation failures are a single tagged type: ``NavigationError`` carries
an ``ErrorKind`` and callers branch on ``err.kind``. The three subclasses
exist so raising sites read naturally and preset the kind.
"""

from dataclasses import dataclass
from enum import Enum


class NavstackError(Exception):
    """Base for all navstack-specific errors."""


class ConfigurationError(NavstackError):
    """Raised when navigator configuration is invalid."""


class ErrorKind(Enum):
    """What invariant a rejected navigation event broke."""

    LOCATION_MISMATCH = "location_mismatch"
    ANCESTOR_NOT_AT_TOP = "ancestor_not_at_top"
    NO_MATCHING_ACTIVITY = "no_matching_activity"


@dataclass(eq=False)
class NavigationError(NavstackError):
    """A navigation event that cannot be applied to the current stack.

    Raised synchronously by the reducer. The navigator never commits
    partial state, so the state before the event stays authoritative.
    These signal broken usage and are not meant to be retried.

    Not frozen: raising sites and context managers write tracebacks and
    notes onto the instance.
    """

    kind: ErrorKind
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.value}: {self.detail}"
        return self.kind.value


class LocationMismatch(NavigationError):  # noqa: N818
    """Event ``from`` location differs from the top activity.

    The navigator and its history port are out of sync.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            kind=ErrorKind.LOCATION_MISMATCH,
            detail=detail or "event origin does not match the top activity",
        )


class AncestorNotAtTop(NavigationError):  # noqa: N818
    """A sibling or ancestor of the target is present below the top.

    Pop back to that activity first.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            kind=ErrorKind.ANCESTOR_NOT_AT_TOP,
            detail=detail or "parent activity is present but not at the top of the stack",
        )


class NoMatchingActivity(NavigationError):  # noqa: N818
    """No present activity corresponds to the requested location or predicate."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            kind=ErrorKind.NO_MATCHING_ACTIVITY,
            detail=detail or "no matching activity found",
        )
