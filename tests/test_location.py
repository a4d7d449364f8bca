"""Tests for navstack.history.location — Location and parse_location."""

import pytest

from navstack.history.location import Location, parse_location


class TestParseString:
    def test_path_search_hash(self) -> None:
        loc = parse_location("/users?page=2#top")
        assert loc == Location("/users", "?page=2", "#top")

    def test_plain_path(self) -> None:
        assert parse_location("/funnel/name") == Location("/funnel/name")

    def test_relative_resolves_against_root(self) -> None:
        assert parse_location("name").pathname == "/name"

    def test_empty_string_is_root(self) -> None:
        assert parse_location("") == Location("/")

    def test_string_ignores_base(self) -> None:
        loc = parse_location("/a", base=Location("/b", "?x=1"))
        assert loc == Location("/a")


class TestParsePartial:
    def test_missing_pathname_comes_from_base(self) -> None:
        loc = parse_location({"search": "?q=1"}, base=Location("/users", "?old=1", "#h"))
        assert loc == Location("/users", "?q=1", "")

    def test_explicit_empty_pathname_is_kept(self) -> None:
        loc = parse_location({"pathname": "", "hash": "#h"}, base=Location("/users"))
        assert loc == Location("", "", "#h")

    def test_full_mapping(self) -> None:
        loc = parse_location({"pathname": "/a", "search": "?b=1", "hash": "#c"})
        assert loc == Location("/a", "?b=1", "#c")

    def test_location_passes_through(self) -> None:
        loc = Location("/a", "?b=1")
        assert parse_location(loc) is loc


class TestLocation:
    def test_defaults(self) -> None:
        loc = Location()
        assert loc.pathname == "/"
        assert loc.search == ""
        assert loc.hash == ""

    def test_href(self) -> None:
        assert Location("/users", "?page=2", "#top").href == "/users?page=2#top"

    def test_frozen(self) -> None:
        loc = Location()
        with pytest.raises(AttributeError):
            loc.pathname = "/other"  # type: ignore[misc]
