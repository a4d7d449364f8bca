"""RouteConfig and MatchedSegment frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from navstack._internal.types import Render

FALLBACK_PATH = "*"


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """A frozen route definition.

    ``path`` is absolute (``/settings``) or relative to the parent route
    (``name`` under ``funnel`` resolves to ``/funnel/name``). The path
    ``"*"`` marks the fallback for its level, used only when no sibling
    matches.

    Supplied once at navigator construction::

        routes = [
            RouteConfig("funnel", Funnel, children=[
                RouteConfig("name", FunnelName),
                RouteConfig("email", FunnelEmail),
            ]),
            RouteConfig("/", Main),
            RouteConfig("*", NotFound),
        ]
    """

    path: str
    render: Render = None
    children: tuple[RouteConfig, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_fallback(self) -> bool:
        return self.path == FALLBACK_PATH


@dataclass(frozen=True, slots=True)
class MatchedSegment:
    """One link of a match chain, outermost route first.

    ``full_path`` is the resolved absolute path of the route (``"*"`` for
    a fallback). ``leftover_path`` is what remained of the pathname after
    this segment when the match descended into children.
    """

    route: RouteConfig
    full_path: str
    leftover_path: str = ""
