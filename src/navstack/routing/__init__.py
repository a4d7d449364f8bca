"""Routing — nested route configuration and prefix/wildcard matching.

Routes are supplied once and never mutated; matching is a pure function
of the configuration and the pathname.
"""

from navstack.routing.compare import is_descendant, is_related, is_sibling
from navstack.routing.matcher import match_routes, resolve_path
from navstack.routing.route import FALLBACK_PATH, MatchedSegment, RouteConfig

__all__ = [
    "FALLBACK_PATH",
    "MatchedSegment",
    "RouteConfig",
    "is_descendant",
    "is_related",
    "is_sibling",
    "match_routes",
    "resolve_path",
]
