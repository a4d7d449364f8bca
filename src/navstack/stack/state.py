"""NavigatorState — the immutable snapshot the reducer advances."""

from collections.abc import Sequence
from dataclasses import dataclass

from navstack.history.location import Location
from navstack.routing.matcher import match_routes
from navstack.routing.route import RouteConfig
from navstack.stack.activity import Activity, FlatActivity
from navstack.stack.compose import compose_activities


@dataclass(frozen=True, slots=True)
class NavigatorState:
    """Activity stack at one point in time.

    ``flat_activities`` is ordered by ascending ``index``.
    ``activity_index`` is the position of the present top within it;
    entries after that position were popped and are only kept until the
    UI reports their exit transition finished. ``activities`` is the
    composed tree over every entry, with ``is_present`` set accordingly.
    """

    activity_index: int
    flat_activities: tuple[FlatActivity, ...]
    activities: tuple[Activity, ...]
    location: Location

    @property
    def top(self) -> FlatActivity:
        """The topmost present flat activity."""
        return self.flat_activities[self.activity_index]

    @property
    def present(self) -> tuple[FlatActivity, ...]:
        """The present window, bottom first."""
        return self.flat_activities[: self.activity_index + 1]

    @property
    def has_pending_exit(self) -> bool:
        """True while popped entries wait for ``ExitFinished``."""
        return len(self.flat_activities) > self.activity_index + 1


def build_state(
    flat_activities: Sequence[FlatActivity],
    activity_index: int,
    location: Location,
) -> NavigatorState:
    """Assemble a state, deriving the activity tree from the flat list."""
    flat = tuple(flat_activities)
    top = flat[activity_index]
    return NavigatorState(
        activity_index=activity_index,
        flat_activities=flat,
        activities=compose_activities(flat, top.index),
        location=location,
    )


def initial_state(routes: Sequence[RouteConfig], location: Location) -> NavigatorState:
    """Single-activity state for the starting location."""
    root = FlatActivity.create(location.pathname, 0, match_routes(routes, location.pathname))
    return build_state((root,), 0, location)


def present_tree(state: NavigatorState) -> tuple[Activity, ...]:
    """Activity tree of the present window only.

    Dismissal compares these trees, so a screen counts as gone as soon as
    it is popped, not when its exit animation ends.
    """
    return compose_activities(state.present)
