"""Diff two activity forests by full path."""

from collections.abc import Iterable
from dataclasses import dataclass

from navstack.stack.activity import Activity, walk_activities


@dataclass(frozen=True, slots=True)
class ActivityDiff:
    """Full paths that appeared and disappeared between two forests."""

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.added or self.removed)


def collect_paths(activities: Iterable[Activity]) -> frozenset[str]:
    """Every full path reachable in a forest."""
    return frozenset(activity.full_path for activity in walk_activities(activities))


def diff_activities(before: Iterable[Activity], after: Iterable[Activity]) -> ActivityDiff:
    """Compare *before* and *after* as sets of full paths.

    The navigator uses ``removed`` to find screens that left the tree
    without an explicit pop, so their pending results can be dismissed.
    Order of the returned paths carries no meaning; they are sorted only
    to keep output stable.
    """
    before_paths = collect_paths(before)
    after_paths = collect_paths(after)
    return ActivityDiff(
        added=tuple(sorted(after_paths - before_paths)),
        removed=tuple(sorted(before_paths - after_paths)),
    )
