"""Stack — flat activity list, composed tree, and the reducer over them."""

from navstack.stack.activity import Activity, FlatActivity, walk_activities
from navstack.stack.compose import compose_activities
from navstack.stack.diff import ActivityDiff, diff_activities
from navstack.stack.reducer import reduce_state
from navstack.stack.state import NavigatorState, build_state, initial_state, present_tree

__all__ = [
    "Activity",
    "ActivityDiff",
    "FlatActivity",
    "NavigatorState",
    "build_state",
    "compose_activities",
    "diff_activities",
    "initial_state",
    "present_tree",
    "reduce_state",
    "walk_activities",
]
