"""Tests for pageroutes.discovery — page file discovery."""

from pathlib import Path

import pytest

from pageroutes.discovery import discover_page_files


def _touch(root: Path, *paths: str) -> None:
    for rel in paths:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<template></template>", encoding="utf-8")


class TestDiscoverPageFiles:
    def test_finds_nested_pages(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.vue", "users/_id.vue", "users/index.vue")
        files = discover_page_files(tmp_path)
        root = tmp_path.resolve()
        assert files == sorted(
            str(root / rel) for rel in ("index.vue", "users/_id.vue", "users/index.vue")
        )

    def test_ignores_other_extensions(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.vue", "helpers.js", "notes.md")
        assert [Path(f).name for f in discover_page_files(tmp_path)] == ["index.vue"]

    def test_custom_extension(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.vue", "about.jsx")
        assert [Path(f).name for f in discover_page_files(tmp_path, ".jsx")] == ["about.jsx"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert discover_page_files(tmp_path) == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Pages directory not found"):
            discover_page_files(tmp_path / "nope")
