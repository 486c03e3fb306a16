"""Nested route tree assembly.

Pages are threaded into a tree one at a time.  Directory nesting becomes
route nesting only where a folder shares its name with a sibling page::

    users.vue          -> /users
    users/_id.vue      -> child ":id?" of /users
    posts/new.vue      -> /posts/new   (no posts.vue, so no nesting)

Routes are held as mutable drafts in an arena addressed by index while
the tree grows, then frozen into immutable :class:`RouteNode` objects
with every sibling list sorted by match precedence.
"""

import logging
import types
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from pageroutes.routing.mixins import apply_mixins, split_segment
from pageroutes.routing.node import PageTokens, RouteNode
from pageroutes.routing.sorting import sort_routes

logger = logging.getLogger("pageroutes.compiler")

DYNAMIC_PREFIX = "_"
INDEX = "index"


@dataclass(slots=True)
class _Draft:
    """A route under construction. Mutable during building only."""

    name: str
    path: str
    component: str
    options: dict[str, Any]
    # Created on first nesting match
    children: list[int] | None = None


class _SegmentState(NamedTuple):
    """Accumulated name and path, plus the sibling list to insert into.

    ``cursor`` is the arena index of the route whose children are the
    current sibling list, or ``None`` for the root list.
    """

    name: str
    path: str
    cursor: int | None


@dataclass(slots=True)
class _RouteArena:
    drafts: list[_Draft] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)

    def siblings(self, cursor: int | None) -> list[int]:
        if cursor is None:
            return self.roots
        children = self.drafts[cursor].children
        return children if children is not None else []

    def find(self, cursor: int | None, name: str) -> int | None:
        for index in self.siblings(cursor):
            if self.drafts[index].name == name:
                return index
        return None

    def open_children(self, index: int) -> int:
        draft = self.drafts[index]
        if draft.children is None:
            draft.children = []
        return index

    def insert(self, cursor: int | None, draft: _Draft) -> int:
        index = len(self.drafts)
        self.drafts.append(draft)
        if cursor is None:
            self.roots.append(index)
        else:
            self.open_children(cursor)
            self.drafts[cursor].children.append(index)  # type: ignore[union-attr]
        return index

    def freeze(self, indices: list[int]) -> list[RouteNode]:
        routes = []
        for index in indices:
            draft = self.drafts[index]
            children = self.freeze(draft.children) if draft.children else []
            routes.append(
                RouteNode(
                    path=draft.path,
                    name=draft.name,
                    component=draft.component,
                    options=types.MappingProxyType(draft.options),
                    children=tuple(children),
                )
            )
        return sort_routes(routes)


def route_path_extension(key: str) -> str:
    """Route pattern for one segment key: ``_id`` -> ``:id?``, else literal."""
    if key.startswith(DYNAMIC_PREFIX):
        return f":{key[1:]}?"
    return key


class RouteTreeBuilder:
    """Incrementally builds a nested route tree from tokenized pages.

    Usage::

        builder = RouteTreeBuilder(mixins)
        for page in pages:
            builder.add(page)
        routes = builder.build()

    Nesting depends on parents being added before the files in their
    same-named folder; :func:`build_routes` guarantees that ordering.
    """

    __slots__ = ("_arena", "_mixins")

    def __init__(self, mixins: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._arena = _RouteArena()
        self._mixins = mixins or {}

    def add(self, page: PageTokens) -> None:
        """Thread one page into the tree."""
        if not page.segments:
            logger.warning("Skipping page %s: no route segments", page.component)
            return

        options: dict[str, Any] = {}
        state = _SegmentState(name="", path="", cursor=None)
        last = len(page.segments) - 1
        for i, segment in enumerate(page.segments):
            key, mixin_names = split_segment(segment)
            apply_mixins(options, mixin_names, self._mixins)
            state = self._advance(state, key, first=i == 0, final=i == last, page=page)

        self._arena.insert(
            state.cursor,
            _Draft(name=state.name, path=state.path, component=page.component, options=options),
        )

    def _advance(
        self,
        state: _SegmentState,
        key: str,
        *,
        first: bool,
        final: bool,
        page: PageTokens,
    ) -> _SegmentState:
        """Apply one segment key to the accumulated state."""
        sanitized = key.removeprefix(DYNAMIC_PREFIX)
        name = f"{state.name}_{sanitized}" if state.name else sanitized

        # A route with this name already exists: descend into its children
        match = self._arena.find(state.cursor, name)
        if match is not None:
            if final:
                logger.warning(
                    "Route %r for %s collides with an existing route and is nested under it",
                    name,
                    page.component,
                )
            return _SegmentState(name=name, path="", cursor=self._arena.open_children(match))

        if final and sanitized == INDEX:
            return _SegmentState(name=name, path=state.path + ("/" if first else ""), cursor=state.cursor)

        return _SegmentState(
            name=name,
            path=f"{state.path}/{route_path_extension(key)}",
            cursor=state.cursor,
        )

    def build(self) -> list[RouteNode]:
        """Freeze the tree into sorted, immutable route nodes."""
        return self._arena.freeze(self._arena.roots)


def build_routes(
    pages: Iterable[PageTokens],
    mixins: Mapping[str, Mapping[str, Any]] | None = None,
) -> list[RouteNode]:
    """Build the (un-normalized) route tree for a set of pages.

    Pages are added shallowest first, then by segments, so the result
    does not depend on the order the files were discovered in.
    """
    builder = RouteTreeBuilder(mixins)
    for page in sorted(pages, key=lambda p: (len(p.segments), p.segments)):
        builder.add(page)
    return builder.build()
