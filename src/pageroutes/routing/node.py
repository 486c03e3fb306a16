"""Data models for the compiled route tree.

Immutable frozen dataclasses. A fresh tree is built on every compiler
run; nothing is updated in place after normalization.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Emitted right after path/component; remaining options follow in mixin order
LEADING_OPTIONS = ("redirect", "meta")


@dataclass(frozen=True, slots=True)
class PageTokens:
    """One page file split into raw route segments.

    Attributes:
        segments: Root-relative segments with the extension stripped,
            still carrying ``_`` prefixes and mixin tokens
            (e.g. ``("users", "_id detail")``).
        component: Component reference relative to the output directory
            (e.g. ``"./pages/users/_id detail.vue"``).
    """

    segments: tuple[str, ...]
    component: str


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One entry in the generated routing table.

    Attributes:
        path: Route pattern. ``""`` inherits the parent's path, a leading
            ``/`` marks a root-level route. Segments may be ``:name?``,
            ``:name``, or ``*``.
        name: Route name, unique among siblings. ``None`` when the node
            is a pure path container for an index child.
        component: Reference to the backing page file.
        options: Mixin-supplied fields (``redirect``, ``meta``, ...).
            Read-only once the tree is built.
        children: Nested routes, ordered by match precedence.
    """

    path: str
    name: str | None = None
    component: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)
    children: tuple["RouteNode", ...] = ()

    @property
    def redirect(self) -> Any:
        return self.options.get("redirect")

    @property
    def meta(self) -> Any:
        return self.options.get("meta")

    def present_options(self) -> list[tuple[str, Any]]:
        """Mixin fields with a value, in output order.

        ``redirect`` and ``meta`` come first, the rest follow in mixin
        order.  Only ``None`` counts as absent, so ``meta: {}`` is kept.
        """
        keys = [key for key in LEADING_OPTIONS if key in self.options]
        keys += [key for key in self.options if key not in LEADING_OPTIONS]
        return [(key, self.options[key]) for key in keys if self.options[key] is not None]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict, omitting absent values.

        Key order matches the rendered router configuration: path,
        component, mixin fields, name, children.
        """
        data: dict[str, Any] = {"path": self.path}
        if self.component:
            data["component"] = self.component
        for key, value in self.present_options():
            data[key] = value
        if self.name:
            data["name"] = self.name
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data
