"""Tests for navstack.errors — exception hierarchy and error kinds."""

from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from navstack.errors import (
    AncestorNotAtTop,
    ConfigurationError,
    ErrorKind,
    LocationMismatch,
    NavigationError,
    NavstackError,
    NoMatchingActivity,
)


class TestHierarchy:
    def test_navigation_error_is_navstack_error(self) -> None:
        assert issubclass(NavigationError, NavstackError)

    def test_configuration_error_is_navstack_error(self) -> None:
        assert issubclass(ConfigurationError, NavstackError)

    @pytest.mark.parametrize("cls", [LocationMismatch, AncestorNotAtTop, NoMatchingActivity])
    def test_kinds_are_navigation_errors(self, cls: type[NavigationError]) -> None:
        assert issubclass(cls, NavigationError)


class TestNavigationError:
    def test_kind_and_detail(self) -> None:
        err = NavigationError(kind=ErrorKind.NO_MATCHING_ACTIVITY, detail="nothing at /x")
        assert err.kind is ErrorKind.NO_MATCHING_ACTIVITY
        assert err.detail == "nothing at /x"

    def test_str_with_detail(self) -> None:
        err = NavigationError(kind=ErrorKind.LOCATION_MISMATCH, detail="out of sync")
        assert str(err) == "location_mismatch: out of sync"

    def test_str_without_detail(self) -> None:
        err = NavigationError(kind=ErrorKind.LOCATION_MISMATCH)
        assert str(err) == "location_mismatch"

    def test_propagates_through_context_manager(self) -> None:
        @contextmanager
        def scope() -> Iterator[None]:
            yield

        with pytest.raises(NavigationError) as exc_info:
            with scope():
                raise AncestorNotAtTop()
        assert exc_info.value.kind is ErrorKind.ANCESTOR_NOT_AT_TOP

    def test_add_note(self) -> None:
        err = NoMatchingActivity()
        err.add_note("while popping /funnel")
        assert err.__notes__ == ["while popping /funnel"]

    def test_branch_on_kind(self) -> None:
        with pytest.raises(NavigationError) as exc_info:
            raise AncestorNotAtTop()
        assert exc_info.value.kind is ErrorKind.ANCESTOR_NOT_AT_TOP


class TestSubclasses:
    @pytest.mark.parametrize(
        ("cls", "kind"),
        [
            (LocationMismatch, ErrorKind.LOCATION_MISMATCH),
            (AncestorNotAtTop, ErrorKind.ANCESTOR_NOT_AT_TOP),
            (NoMatchingActivity, ErrorKind.NO_MATCHING_ACTIVITY),
        ],
    )
    def test_preset_kind_and_default_detail(self, cls: type[NavigationError], kind: ErrorKind) -> None:
        err = cls()
        assert err.kind is kind
        assert err.detail

    def test_custom_detail(self) -> None:
        err = NoMatchingActivity("pop target '/x' is not on the stack")
        assert str(err) == "no_matching_activity: pop target '/x' is not on the stack"
