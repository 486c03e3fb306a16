"""Tests for pageroutes.compiler — end-to-end compilation of page paths."""

import random
from itertools import permutations

import pytest

from pageroutes.compiler import compile_routes, tokenize_pages
from pageroutes.config import RoutesConfig

PAGES = "/app/src/pages"


def _config(**overrides: object) -> RoutesConfig:
    return RoutesConfig(pages_dir=PAGES, **overrides)  # type: ignore[arg-type]


def _files(*paths: str) -> list[str]:
    return [f"{PAGES}/{p}.vue" for p in paths]


class TestBasicSite:
    def test_root_order_and_promotion(self) -> None:
        routes = compile_routes(_files("index", "about", "users/_id", "users/index"), _config())
        assert [(r.name, r.path) for r in routes] == [
            ("index", "/"),
            ("about", "/about"),
            ("users", "/users"),
            ("users_id", "/users/:id"),
        ]

    def test_no_promotion_without_index(self) -> None:
        routes = compile_routes(_files("index", "about", "users/_id"), _config())
        assert [r.path for r in routes] == ["/", "/about", "/users/:id?"]

    def test_components_relative_to_output_dir(self) -> None:
        (route,) = compile_routes(_files("about"), _config())
        assert route.component == "./pages/about.vue"

    def test_explicit_output_dir(self) -> None:
        (route,) = compile_routes(_files("about"), _config(output_dir="/app/src/router"))
        assert route.component == "../pages/about.vue"


class TestNestingAndDeletion:
    def test_implicit_nesting(self) -> None:
        (parent,) = compile_routes(_files("foo", "foo/bar"), _config())
        assert (parent.name, parent.path) == ("foo", "/foo")
        assert [(c.name, c.path) for c in parent.children] == [("foo_bar", "bar")]

    def test_soft_deleted_folder(self) -> None:
        routes = compile_routes(_files("index", "!draft/page", "!old"), _config())
        assert [r.name for r in routes] == ["index"]

    def test_tokenize_pages_drops_deleted(self) -> None:
        pages = tokenize_pages(_files("a", "!b"), _config())
        assert [p.segments for p in pages] == [("a",)]


class TestMixins:
    def test_meta_merged_from_mixins(self) -> None:
        config = _config(mixin={"meta-a": {"meta": {"x": 1}}, "meta-b": {"meta": {"y": 2, "x": 3}}})
        (route,) = compile_routes(_files("section meta-a meta-b"), config)
        assert route.name == "section"
        assert route.meta == {"x": 3, "y": 2}

    def test_unknown_mixin_ignored(self) -> None:
        (route,) = compile_routes(_files("section nope"), _config())
        assert route.options == {}


SITE = [
    "index",
    "about",
    "_slug",
    "users",
    "users/index",
    "users/_id",
    "users/_id/edit",
    "posts/index",
    "posts/_id",
    "docs/*",
    "!draft/secret",
]


class TestDeterminism:
    def test_input_order_irrelevant(self) -> None:
        expected = compile_routes(_files(*SITE), _config())
        rng = random.Random(1234)
        for _ in range(50):
            shuffled = _files(*SITE)
            rng.shuffle(shuffled)
            assert compile_routes(shuffled, _config()) == expected

    @pytest.mark.parametrize("order", list(permutations(["foo", "foo/bar", "foo/index"])))
    def test_nesting_order_irrelevant(self, order: tuple[str, ...]) -> None:
        (parent,) = compile_routes(_files(*order), _config())
        assert parent.name is None
        assert [c.path for c in parent.children] == ["", "bar"]

    def test_fresh_tree_each_call(self) -> None:
        first = compile_routes(_files(*SITE), _config())
        second = compile_routes(_files(*SITE), _config())
        assert first == second
        assert first[0] is not second[0]


class TestSerialization:
    def test_to_dict(self) -> None:
        config = _config(mixin={"auth": {"meta": {"requiresAuth": True}}})
        (parent,) = compile_routes(_files("users auth", "users/index"), config)
        assert parent.to_dict() == {
            "path": "/users",
            "component": "./pages/users auth.vue",
            "meta": {"requiresAuth": True},
            "children": [
                {"path": "", "component": "./pages/users/index.vue", "name": "users"},
            ],
        }
