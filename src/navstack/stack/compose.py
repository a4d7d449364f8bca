"""Compose flat activities into a nested activity tree.

Each flat activity's match chain is replayed from the root. A node is
reused when the current level already holds one with the same full path,
so ``/funnel/name`` and ``/funnel/email`` end up as siblings under a
single ``/funnel`` node. The tree is built in mutable builder nodes and
frozen into ``Activity`` values at the end.
"""

from collections.abc import Iterable

from navstack._internal.types import Render
from navstack.stack.activity import Activity, FlatActivity


class _Node:
    """A tree node under construction. Mutable during composition only."""

    __slots__ = ("children", "depth", "full_path", "index", "render")

    def __init__(self, full_path: str, depth: int, index: int, render: Render) -> None:
        self.full_path = full_path
        self.depth = depth
        # Index of the flat activity that created the node
        self.index = index
        self.render = render
        self.children: list[_Node] = []

    def freeze(self, present_index: int | None) -> Activity:
        return Activity(
            full_path=self.full_path,
            depth=self.depth,
            index=self.index,
            render=self.render,
            is_present=present_index is None or self.index <= present_index,
            children=tuple(child.freeze(present_index) for child in self.children),
        )


def compose_activities(
    flat_activities: Iterable[FlatActivity],
    present_index: int | None = None,
) -> tuple[Activity, ...]:
    """Build the activity forest for *flat_activities*.

    A node is present when the flat activity that created it has an
    ``index`` no greater than *present_index*. ``None`` marks every node
    present.
    """
    roots: list[_Node] = []

    for flat in flat_activities:
        level = roots
        for depth, segment in enumerate(flat.matched_routes):
            node = next((n for n in level if n.full_path == segment.full_path), None)
            if node is None:
                node = _Node(segment.full_path, depth, flat.index, segment.route.render)
                level.append(node)
            level = node.children

    return tuple(node.freeze(present_index) for node in roots)
