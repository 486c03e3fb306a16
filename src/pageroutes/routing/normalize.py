"""Post-build normalization of index routes and optional parameters.

A folder's ``index`` page becomes that folder's default route.  Three
rewrites follow from that convention:

- ``_index`` suffixes are dropped from route names.
- A route with an empty-path (index) child loses its name; routers
  address the child, the parent only contributes its path.
- An optional parameter (``:id?``) becomes required (``:id``) when a
  sibling index route already covers the parameterless URL.  With
  ``users/index.vue`` present, ``/users/:id?`` would be ambiguous with
  ``/users``, so it is rewritten to ``/users/:id``.

Child paths are made relative (no leading ``/``).  The pass returns new
nodes and is idempotent.
"""

from collections.abc import Sequence
from dataclasses import replace

from pageroutes.routing.node import RouteNode

INDEX = "index"
INDEX_SUFFIX = "_index"


def clean_children_routes(routes: Sequence[RouteNode], is_child: bool = False) -> list[RouteNode]:
    """Normalize one sibling list and, recursively, all nested lists.

    Args:
        routes: Sibling routes, as produced by the builder.
        is_child: ``True`` for nested lists, whose paths are relative.
    """
    index_names = [
        route.name.split("_")
        for route in routes
        if route.name and (route.name == INDEX or route.name.endswith(INDEX_SUFFIX))
    ]

    cleaned: list[RouteNode] = []
    for route in routes:
        path = route.path.removeprefix("/") if is_child else route.path
        if "?" in path and route.name:
            path = _promote_parameters(path, route.name, index_names, is_child=is_child)

        name = strip_index_suffix(route.name) if route.name else route.name
        children = route.children
        if children:
            if any(child.path == "" for child in children):
                name = None
            children = tuple(clean_children_routes(children, is_child=True))

        cleaned.append(replace(route, path=path, name=name, children=children))
    return cleaned


def _promote_parameters(
    path: str,
    name: str,
    index_names: list[list[str]],
    *,
    is_child: bool,
) -> str:
    """Make optional parameters required where a sibling index demands it.

    A name segment at depth ``k`` maps to path segment ``k - offset``,
    where ``offset`` counts the leading name segments contributed by
    ancestor routes (present in the name but not in a relative path).
    """
    names = name.split("_")
    segments = path.split("/")
    if not is_child:
        segments = segments[1:]

    offset = _path_depth(names, segments) - len(segments)

    for index_route in index_names:
        k = index_route.index(INDEX)
        position = k - offset
        if not 0 <= position < len(segments):
            continue
        if names[:k] != index_route[:k]:
            continue
        segments[position] = segments[position].replace("?", "", 1)

    joined = "/".join(segments)
    return joined if is_child else "/" + joined


def strip_index_suffix(name: str) -> str:
    """Drop every trailing ``_index`` (``a_index_index`` -> ``a``)."""
    while name.endswith(INDEX_SUFFIX):
        name = name.removesuffix(INDEX_SUFFIX)
    return name


def _path_depth(names: list[str], segments: list[str]) -> int:
    """Number of name segments that map onto path segments.

    A final ``index`` page adds a name segment but no path segment; an
    ``index`` folder adds both.  Counting trailing ``index`` path segments
    instead of trailing name tokens gives the same depth before and after
    ``_index`` suffixes are stripped.
    """
    depth = len(names)
    while depth and names[depth - 1] == INDEX:
        depth -= 1
    for segment in reversed(segments):
        if segment != INDEX:
            break
        depth += 1
    return depth
