"""Tests for pageroutes.config — RoutesConfig frozen dataclass and mixin files."""

import json
from pathlib import Path

import pytest

from pageroutes.config import RoutesConfig, load_mixin_file
from pageroutes.errors import ConfigurationError


class TestRoutesConfig:
    def test_defaults(self) -> None:
        cfg = RoutesConfig(pages_dir="/app/src/pages")

        assert cfg.output_dir is None
        assert cfg.output_file == "routes.js"
        assert cfg.extension == ".vue"
        assert cfg.mixin == {}
        assert cfg.watch_interval == 0.5

    def test_frozen(self) -> None:
        cfg = RoutesConfig(pages_dir="pages")

        with pytest.raises(AttributeError):
            cfg.extension = ".jsx"  # type: ignore[misc]

    def test_output_dir_defaults_to_pages_parent(self) -> None:
        cfg = RoutesConfig(pages_dir="/app/src/pages")
        assert cfg.resolved_output_dir == Path("/app/src")
        assert cfg.output_path == Path("/app/src/routes.js")

    def test_explicit_output_dir(self) -> None:
        cfg = RoutesConfig(pages_dir="/app/src/pages", output_dir="/app/build", output_file="r.js")
        assert cfg.output_path == Path("/app/build/r.js")

    def test_pages_dir_as_path(self) -> None:
        cfg = RoutesConfig(pages_dir=Path("/app/pages"))
        assert cfg.pages_root == Path("/app/pages")


class TestRoutesConfigValidation:
    def test_extension_requires_dot(self) -> None:
        with pytest.raises(ConfigurationError, match="extension"):
            RoutesConfig(pages_dir="pages", extension="vue")

    def test_watch_interval_must_be_positive(self) -> None:
        with pytest.raises(ConfigurationError, match="watch_interval"):
            RoutesConfig(pages_dir="pages", watch_interval=0)

    def test_mixin_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="'auth'"):
            RoutesConfig(pages_dir="pages", mixin={"auth": ["meta"]})  # type: ignore[dict-item]

    @pytest.mark.parametrize("key", ["name", "path", "component", "children"])
    def test_mixin_cannot_set_reserved_keys(self, key: str) -> None:
        with pytest.raises(ConfigurationError, match=key):
            RoutesConfig(pages_dir="pages", mixin={"bad": {key: "x"}})

    def test_mixin_with_route_fields_accepted(self) -> None:
        cfg = RoutesConfig(
            pages_dir="pages",
            mixin={"auth": {"meta": {"requiresAuth": True}}, "home": {"redirect": "/"}},
        )
        assert cfg.mixin["home"] == {"redirect": "/"}


class TestLoadMixinFile:
    def test_loads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "mixins.json"
        path.write_text(json.dumps({"auth": {"meta": {"requiresAuth": True}}}), encoding="utf-8")

        assert load_mixin_file(path) == {"auth": {"meta": {"requiresAuth": True}}}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_mixin_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "mixins.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_mixin_file(path)

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "mixins.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="JSON object"):
            load_mixin_file(path)
