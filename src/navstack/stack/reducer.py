"""Stack reducer — ``(state, event) -> state``.

Pure: the incoming state is never mutated, the activity tree is rebuilt
from scratch, and an invalid event raises a ``NavigationError`` before
anything is produced. Preconditions are checked against the present
window only; popped entries still animating out never take part in
routing decisions.

Removal is two-phase. POP moves ``activity_index`` back at once but
leaves the popped entries in place so the UI can animate them out;
``ExitFinished`` then drops them for good.
"""

import logging
from collections.abc import Sequence

from navstack.errors import AncestorNotAtTop, LocationMismatch, NoMatchingActivity
from navstack.history.events import ExitFinished, HistoryAction, HistoryEvent, NavigationEvent
from navstack.routing.compare import is_related
from navstack.routing.matcher import match_routes
from navstack.routing.route import MatchedSegment, RouteConfig
from navstack.stack.activity import FlatActivity
from navstack.stack.state import NavigatorState, build_state

logger = logging.getLogger("navstack.stack")


def reduce_state(
    state: NavigatorState,
    event: NavigationEvent,
    routes: Sequence[RouteConfig],
    *,
    two_phase: bool = True,
) -> NavigatorState:
    """Advance *state* by one navigation event.

    Raises ``LocationMismatch`` when a history event does not originate
    from the top activity, ``AncestorNotAtTop`` when a push or replace
    would skip over a related activity, and ``NoMatchingActivity`` when a
    pop target is not on the stack. Popping the last activity is logged
    and leaves the state unchanged.

    With ``two_phase=False`` popped entries are dropped immediately and
    ``ExitFinished`` has nothing left to do.
    """
    if isinstance(event, ExitFinished):
        return _finish_exit(state)

    top = state.top
    if event.from_.pathname != top.pathname:
        msg = (
            f"top activity is {top.pathname!r} but the {event.type.value} event "
            f"came from {event.from_.pathname!r}"
        )
        raise LocationMismatch(msg)

    if event.type is HistoryAction.PUSH:
        return _push(state, event, routes)
    if event.type is HistoryAction.POP:
        return _pop(state, event, two_phase=two_phase)
    if event.type is HistoryAction.REPLACE:
        return _replace(state, event, routes)

    logger.warning("Ignoring unknown history event type %r", event.type)
    return state


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def _push(state: NavigatorState, event: HistoryEvent, routes: Sequence[RouteConfig]) -> NavigatorState:
    pathname = event.to.pathname
    matched = match_routes(routes, pathname)
    present = state.present

    position = _first_related(present, matched)
    if position is not None and position != len(present) - 1:
        msg = (
            f"cannot push {pathname!r}: related activity {present[position].pathname!r} "
            f"is below {state.top.pathname!r}; pop back to it first"
        )
        raise AncestorNotAtTop(msg)

    # Indices keep growing even past entries that are still exiting
    next_index = max(flat.index for flat in state.flat_activities) + 1
    if state.has_pending_exit:
        logger.debug(
            "push %s discards %d exiting activities",
            pathname,
            len(state.flat_activities) - len(present),
        )

    flat_activities = (*present, FlatActivity.create(pathname, next_index, matched))
    return build_state(flat_activities, len(flat_activities) - 1, event.to)


def _pop(state: NavigatorState, event: HistoryEvent, *, two_phase: bool) -> NavigatorState:
    pathname = event.to.pathname
    present = state.present

    # Nearest entry first; a match on the top keeps the stack as it is
    position = next(
        (i for i in range(len(present) - 1, -1, -1) if present[i].pathname == pathname),
        None,
    )
    if position is None:
        if len(present) == 1:
            logger.warning("pop: cannot pop the last activity %s", state.top.pathname)
            return state
        msg = f"pop target {pathname!r} is not on the stack"
        raise NoMatchingActivity(msg)

    flat_activities = state.flat_activities if two_phase else present[: position + 1]
    return build_state(flat_activities, position, event.to)


def _replace(state: NavigatorState, event: HistoryEvent, routes: Sequence[RouteConfig]) -> NavigatorState:
    pathname = event.to.pathname
    matched = match_routes(routes, pathname)
    below = state.present[:-1]

    position = _first_related(below, matched)
    if position is not None and position != len(below) - 1:
        msg = (
            f"cannot replace {state.top.pathname!r} with {pathname!r}: related activity "
            f"{below[position].pathname!r} is not directly below the top"
        )
        raise AncestorNotAtTop(msg)

    replaced = FlatActivity.create(pathname, state.top.index, matched)
    flat_activities = (*below, replaced)
    return build_state(flat_activities, len(flat_activities) - 1, event.to)


def _finish_exit(state: NavigatorState) -> NavigatorState:
    if not state.has_pending_exit:
        return state
    return build_state(state.present, state.activity_index, state.location)


def _first_related(
    activities: Sequence[FlatActivity],
    matched: Sequence[MatchedSegment],
) -> int | None:
    """Position of the lowest activity that is a sibling or ancestor of *matched*."""
    for position, flat in enumerate(activities):
        if is_related(flat.matched_routes, matched):
            return position
    return None
