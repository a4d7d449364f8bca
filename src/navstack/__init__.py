"""Navstack — a hierarchical activity stack over a linear location history.

Turns push/pop/replace history events into a validated stack of matched
routes, a tree of nested activities, and awaitable push results.

Basic usage::

    from navstack import MemoryHistory, Navigator, RouteConfig

    routes = [
        RouteConfig("funnel", Funnel, children=[RouteConfig("name", FunnelName)]),
        RouteConfig("/", Main),
        RouteConfig("*", NotFound),
    ]
    navigator = Navigator(MemoryHistory("/"), routes)

    result = navigator.push("/funnel/name")
    navigator.pop("Alice")
    result.result()  # "Alice"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Activity",
    "AncestorNotAtTop",
    "ConfigurationError",
    "Dismissed",
    "ErrorKind",
    "ExitFinished",
    "FlatActivity",
    "History",
    "HistoryAction",
    "HistoryEvent",
    "Location",
    "LocationMismatch",
    "MatchedSegment",
    "MemoryHistory",
    "NavigationError",
    "Navigator",
    "NavigatorConfig",
    "NavigatorState",
    "NavstackError",
    "NoMatchingActivity",
    "PushResult",
    "RouteConfig",
    "match_routes",
    "parse_location",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import navstack`` fast while providing a clean top-level API.
    """
    if name == "Navigator":
        from navstack.navigator import Navigator

        return Navigator

    if name == "NavigatorConfig":
        from navstack.config import NavigatorConfig

        return NavigatorConfig

    if name in ("Dismissed", "PushResult"):
        from navstack import results as _results

        return getattr(_results, name)

    if name in (
        "ExitFinished",
        "History",
        "HistoryAction",
        "HistoryEvent",
        "Location",
        "MemoryHistory",
        "parse_location",
    ):
        from navstack import history as _history

        return getattr(_history, name)

    if name in ("MatchedSegment", "RouteConfig", "match_routes"):
        from navstack import routing as _routing

        return getattr(_routing, name)

    if name in ("Activity", "FlatActivity", "NavigatorState"):
        from navstack import stack as _stack

        return getattr(_stack, name)

    if name in (
        "AncestorNotAtTop",
        "ConfigurationError",
        "ErrorKind",
        "LocationMismatch",
        "NavigationError",
        "NavstackError",
        "NoMatchingActivity",
    ):
        from navstack import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
