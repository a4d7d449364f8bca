"""Tests for navstack.debug — state snapshots."""

import json

from navstack.debug import describe_state, format_state
from navstack.navigator import Navigator


class TestDescribeState:
    def test_snapshot_after_pop(self, navigator: Navigator) -> None:
        navigator.push("/funnel/name?from=home")
        navigator.pop()

        snapshot = describe_state(navigator.state)

        assert snapshot["location"] == {"pathname": "/", "search": "", "hash": ""}
        assert snapshot["activity_index"] == 0
        assert snapshot["top_routes"] == ["/"]
        assert snapshot["flat_activities"][1] == {
            "pathname": "/funnel/name",
            "depth": 1,
            "index": 1,
            "matched": ["/funnel", "/funnel/name"],
        }
        funnel = snapshot["activities"][1]
        assert funnel["full_path"] == "/funnel"
        assert funnel["is_present"] is False
        assert funnel["children"][0]["full_path"] == "/funnel/name"

    def test_format_state_is_json(self, navigator: Navigator) -> None:
        navigator.push("/about")
        assert json.loads(format_state(navigator.state)) == describe_state(navigator.state)
