"""Tests for navstack.stack.diff — added/removed full paths."""

from navstack.stack.activity import Activity, walk_activities
from navstack.stack.diff import ActivityDiff, collect_paths, diff_activities


def _node(path: str, *children: Activity) -> Activity:
    return Activity(full_path=path, depth=0, index=0, render=None, children=children)


class TestDiff:
    def test_added_and_removed(self) -> None:
        before = (_node("A"), _node("B"), _node("C"))
        after = (_node("A"), _node("C"), _node("D"))
        diff = diff_activities(before, after)
        assert set(diff.added) == {"D"}
        assert set(diff.removed) == {"B"}

    def test_nested_paths_are_walked(self) -> None:
        before = (_node("/funnel", _node("/funnel/name"), _node("/funnel/email")),)
        after = (_node("/funnel", _node("/funnel/name")),)
        diff = diff_activities(before, after)
        assert diff.added == ()
        assert diff.removed == ("/funnel/email",)

    def test_identical_trees(self) -> None:
        tree = (_node("/", _node("/a")),)
        diff = diff_activities(tree, tree)
        assert diff == ActivityDiff()
        assert not diff

    def test_from_empty(self) -> None:
        diff = diff_activities((), (_node("/"),))
        assert diff.added == ("/",)
        assert bool(diff) is True


class TestWalk:
    def test_depth_first_parents_first(self) -> None:
        tree = (_node("/a", _node("/a/b", _node("/a/b/c"))), _node("/d"))
        assert [node.full_path for node in walk_activities(tree)] == ["/a", "/a/b", "/a/b/c", "/d"]

    def test_collect_paths(self) -> None:
        tree = (_node("/a", _node("/a/b")), _node("/a"))
        assert collect_paths(tree) == frozenset({"/a", "/a/b"})
