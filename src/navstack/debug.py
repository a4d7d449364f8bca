"""JSON-friendly snapshots of navigator state.

Used for DEBUG logging of every transition and handy in a REPL or a
debug panel. Route ``render`` targets are omitted; they are arbitrary
objects and rarely serializable.
"""

import json
from typing import Any

from navstack.stack.activity import Activity, FlatActivity
from navstack.stack.state import NavigatorState


def _describe_flat(flat: FlatActivity) -> dict[str, Any]:
    return {
        "pathname": flat.pathname,
        "depth": flat.depth,
        "index": flat.index,
        "matched": [segment.full_path for segment in flat.matched_routes],
    }


def _describe_activity(activity: Activity) -> dict[str, Any]:
    return {
        "full_path": activity.full_path,
        "depth": activity.depth,
        "index": activity.index,
        "is_present": activity.is_present,
        "children": [_describe_activity(child) for child in activity.children],
    }


def describe_state(state: NavigatorState) -> dict[str, Any]:
    """Plain-dict view of *state*: location, flat stack, and activity tree."""
    return {
        "location": {
            "pathname": state.location.pathname,
            "search": state.location.search,
            "hash": state.location.hash,
        },
        "activity_index": state.activity_index,
        "top_routes": [segment.route.path for segment in state.top.matched_routes],
        "flat_activities": [_describe_flat(flat) for flat in state.flat_activities],
        "activities": [_describe_activity(activity) for activity in state.activities],
    }


def format_state(state: NavigatorState) -> str:
    """``describe_state`` rendered as indented JSON."""
    return json.dumps(describe_state(state), indent=2)
