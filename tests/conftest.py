"""Shared route table and navigator fixtures."""

from collections.abc import Iterator

import pytest

from navstack.history import MemoryHistory
from navstack.navigator import Navigator
from navstack.routing import RouteConfig


def funnel() -> str:
    return "funnel"


def funnel_name() -> str:
    return "funnel-name"


def funnel_email() -> str:
    return "funnel-email"


def settings() -> str:
    return "settings"


def settings_profile() -> str:
    return "settings-profile"


def main() -> str:
    return "main"


def about() -> str:
    return "about"


def not_found() -> str:
    return "not-found"


ROUTES = (
    RouteConfig(
        "funnel",
        funnel,
        children=[
            RouteConfig("name", funnel_name),
            RouteConfig("email", funnel_email),
        ],
    ),
    RouteConfig(
        "settings",
        settings,
        children=[RouteConfig("profile", settings_profile)],
    ),
    RouteConfig("/", main),
    RouteConfig("/about", about),
    RouteConfig("*", not_found),
)


@pytest.fixture
def routes() -> tuple[RouteConfig, ...]:
    return ROUTES


@pytest.fixture
def history() -> MemoryHistory:
    return MemoryHistory("/")


@pytest.fixture
def navigator(history: MemoryHistory) -> Iterator[Navigator]:
    nav = Navigator(history, ROUTES)
    yield nav
    nav.close()
