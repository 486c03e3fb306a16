"""Sibling ordering by route match precedence.

Client-side routers try routes in table order, so more specific
patterns must come first: static segments before dynamic ones, dynamic
before wildcards.  Ordering is a pure function of each route's path,
which makes it independent of insertion order.

Examples (sorted)::

    ""          index / container placeholders
    "/"         root index
    "/about"
    "/users"
    "/users/:id?"
    "/:slug"
    "/*"
"""

from collections.abc import Iterable

from pageroutes.routing.node import RouteNode

STATIC = 0
DYNAMIC = 1
WILDCARD = 2

# Terminators appended after the last segment rank.  A path that ends
# before its sibling sorts first, unless it ends in a wildcard, which
# swallows everything below it and must sort last.
_END = -1
_END_WILDCARD = 3


def segment_rank(segment: str) -> int:
    """Classify one path segment: static 0, dynamic 1, wildcard 2."""
    if segment == "*":
        return WILDCARD
    if ":" in segment:
        return DYNAMIC
    return STATIC


def path_ranks(path: str) -> tuple[int, ...]:
    """Rank sequence for a route path, terminator included.

    The empty path gets an empty sequence so it sorts ahead of
    everything else.
    """
    if path == "":
        return ()
    parts = [part for part in path.removeprefix("/").split("/") if part]
    ranks = tuple(segment_rank(part) for part in parts)
    if ranks and ranks[-1] == WILDCARD:
        return (*ranks, _END_WILDCARD)
    return (*ranks, _END)


def route_sort_key(route: RouteNode) -> tuple[bool, tuple[int, ...], str, str]:
    """Total ordering key: empty path, segment ranks, then path and name."""
    return (route.path != "", path_ranks(route.path), route.path, route.name or "")


def sort_routes(routes: Iterable[RouteNode]) -> list[RouteNode]:
    """Return *routes* ordered by match precedence."""
    return sorted(routes, key=route_sort_key)
