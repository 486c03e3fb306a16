"""Mixin resolution for route segments.

A segment such as ``"section auth wide"`` carries the real path key
``section`` followed by mixin names.  Each mixin name is looked up in the
configured mapping and deep-merged into the route being built.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from copy import deepcopy
from typing import Any

logger = logging.getLogger("pageroutes.compiler")

_WHITESPACE_RE = re.compile(r"\s+")


def split_segment(segment: str) -> tuple[str, tuple[str, ...]]:
    """Split a raw segment into its path key and mixin names.

    Examples::

        "users"              -> ("users", ())
        "_id detail"         -> ("_id", ("detail",))
        "section auth wide"  -> ("section", ("auth", "wide"))
    """
    tokens = _WHITESPACE_RE.split(segment)
    return tokens[0], tuple(token for token in tokens[1:] if token)


def apply_mixins(
    options: dict[str, Any],
    names: Iterable[str],
    mixins: Mapping[str, Mapping[str, Any]],
) -> dict[str, Any]:
    """Deep-merge the named mixins into *options*, in order.

    Later mixins win on overlapping keys; nested mappings are merged
    rather than replaced.  Unknown names merge nothing.
    """
    for name in names:
        mixin = mixins.get(name)
        if mixin is None:
            logger.debug("Unknown mixin %r ignored", name)
            continue
        _deep_merge(options, mixin)
    return options


def _deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _deep_merge(current, value)
            continue
        target[key] = _copy_value(value)


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy_value(v) for k, v in value.items()}
    return deepcopy(value)
