"""Route generation configuration.

RoutesConfig is a frozen dataclass — immutable after creation, validated
once, and passed unchanged to the compiler, renderer, and watcher.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pageroutes.errors import ConfigurationError

# Keys the compiler owns; a mixin may not overwrite them.
RESERVED_ROUTE_KEYS = frozenset({"name", "path", "component", "children"})


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Route generation configuration. Immutable after creation.

    Only ``pages_dir`` is required::

        config = RoutesConfig(
            pages_dir="src/pages",
            mixin={"auth": {"meta": {"requiresAuth": True}}},
        )
    """

    # Page root: segments are computed relative to it
    pages_dir: str | Path

    # Output (defaults to the parent of pages_dir)
    output_dir: str | Path | None = None
    output_file: str = "routes.js"

    # Page files
    extension: str = ".vue"

    # Named partial route objects, referenced as "segment mixin-a mixin-b"
    mixin: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    # Watch mode
    watch_interval: float = 0.5  # Seconds between filesystem polls

    def __post_init__(self) -> None:
        if not self.extension.startswith("."):
            msg = f"extension must start with '.', got {self.extension!r}"
            raise ConfigurationError(msg)
        if self.watch_interval <= 0:
            msg = f"watch_interval must be positive, got {self.watch_interval!r}"
            raise ConfigurationError(msg)
        for mixin_name, mixin in self.mixin.items():
            if not isinstance(mixin, Mapping):
                msg = f"Mixin {mixin_name!r} must be a mapping, got {type(mixin).__name__}"
                raise ConfigurationError(msg)
            reserved = RESERVED_ROUTE_KEYS.intersection(mixin)
            if reserved:
                keys = ", ".join(sorted(reserved))
                msg = f"Mixin {mixin_name!r} cannot set reserved route keys: {keys}"
                raise ConfigurationError(msg)

    @property
    def pages_root(self) -> Path:
        return Path(self.pages_dir).resolve()

    @property
    def resolved_output_dir(self) -> Path:
        """Directory the rendered routes file lives in."""
        if self.output_dir is None:
            return self.pages_root.parent
        return Path(self.output_dir).resolve()

    @property
    def output_path(self) -> Path:
        return self.resolved_output_dir / self.output_file


def load_mixin_file(path: str | Path) -> dict[str, dict[str, Any]]:
    """Load mixin definitions from a JSON object file.

    The file maps mixin names to partial route objects::

        {"auth": {"meta": {"requiresAuth": true}}, "home": {"redirect": "/"}}

    Raises:
        ConfigurationError: If the file cannot be read, is not valid
            JSON, or does not contain a JSON object.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read mixin file {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Mixin file {str(path)!r} is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Mixin file {str(path)!r} must contain a JSON object, got {type(data).__name__}"
        raise ConfigurationError(msg)
    return data
