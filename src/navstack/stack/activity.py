"""FlatActivity and Activity frozen dataclasses."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from navstack._internal.types import Render
from navstack.routing.route import MatchedSegment


@dataclass(frozen=True, slots=True)
class FlatActivity:
    """One entry of the linear activity stack.

    ``index`` is the sequence number assigned when the entry was pushed
    (or inherited when it replaced another). ``depth`` is the length of
    the match chain minus one.
    """

    pathname: str
    depth: int
    index: int
    matched_routes: tuple[MatchedSegment, ...]

    @classmethod
    def create(cls, pathname: str, index: int, matched_routes: Iterable[MatchedSegment]) -> FlatActivity:
        chain = tuple(matched_routes)
        return cls(pathname=pathname, depth=len(chain) - 1, index=index, matched_routes=chain)

    def contains_path(self, full_path: str) -> bool:
        """True when any segment of the match chain resolves to *full_path*."""
        return any(segment.full_path == full_path for segment in self.matched_routes)


@dataclass(frozen=True, slots=True)
class Activity:
    """A node of the composed activity tree.

    Nodes are shared between flat activities with a common route prefix,
    so a parent route hosts all of its matched children. ``is_present``
    is False while the owning flat activity is being animated out.
    """

    full_path: str
    depth: int
    index: int
    render: Render
    is_present: bool = True
    children: tuple[Activity, ...] = ()


def walk_activities(activities: Iterable[Activity]) -> Iterator[Activity]:
    """Yield every node of a forest, depth-first, parents before children."""
    for activity in activities:
        yield activity
        yield from walk_activities(activity.children)
