"""Nested route matching.

Matching walks the route configuration level by level and returns the
chain of matched segments from the outermost route to the innermost.
Route order is the tie-break: the first exact match at a level wins,
even if a later sibling could also match.
"""

from collections.abc import Sequence

from navstack.routing.route import MatchedSegment, RouteConfig


def resolve_path(parent_path: str, route_path: str) -> str:
    """Join a parent path and a route path into an absolute path.

    Examples::

        resolve_path("", "funnel")         -> "/funnel"
        resolve_path("/", "funnel")        -> "/funnel"
        resolve_path("/funnel", "name")    -> "/funnel/name"
        resolve_path("/funnel", "/about")  -> "/about"
    """
    if route_path.startswith("/"):
        return route_path
    if not parent_path or parent_path == "/":
        return "/" + route_path
    return f"{parent_path}/{route_path}"


def match_routes(
    routes: Sequence[RouteConfig],
    pathname: str,
    parent_path: str = "",
) -> list[MatchedSegment]:
    """Match *pathname* against *routes*.

    Returns the matched chain, outermost first. When nothing at a level
    matches, the first ``"*"`` route of that level is returned as a
    one-element chain; without one the result is empty. Never raises.

    Example::

        match_routes(routes, "/funnel/name")
        # -> [MatchedSegment(funnel, "/funnel", "name"),
        #     MatchedSegment(name, "/funnel/name", "")]
    """
    fallback: RouteConfig | None = None

    for route in routes:
        if route.is_fallback:
            # Only the first fallback per level is honored
            if fallback is None:
                fallback = route
            continue

        full_path = resolve_path(parent_path, route.path)

        if pathname == full_path:
            return [MatchedSegment(route=route, full_path=full_path)]

        if route.children and pathname.startswith(full_path + "/"):
            leftover = pathname[len(full_path) + 1 :]
            child_chain = match_routes(route.children, pathname, full_path)
            if child_chain:
                head = MatchedSegment(route=route, full_path=full_path, leftover_path=leftover)
                return [head, *child_chain]

    if fallback is not None:
        return [MatchedSegment(route=fallback, full_path=fallback.path)]
    return []
