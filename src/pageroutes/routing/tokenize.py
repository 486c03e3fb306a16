"""Page file path tokenizer.

Turns one page file path into root-relative route segments plus the
component reference used by the rendered router configuration.
"""

import logging
import os
import re
from pathlib import Path

from pageroutes.routing.node import PageTokens

logger = logging.getLogger("pageroutes.compiler")

# Repeated separators collapse to one
_SEPARATORS_RE = re.compile(r"/{2,}")

# Segments starting with "!" soft-delete the whole file
DELETED_PREFIX = "!"


def tokenize_page(
    file: str | Path,
    pages_dir: str | Path,
    output_dir: str | Path,
    *,
    extension: str = ".vue",
) -> PageTokens | None:
    """Split a page file path into route segments.

    Returns ``None`` when the file is soft-deleted (any segment starts
    with ``!``) or yields no segments at all.

    Args:
        file: Path to the page file.
        pages_dir: Page root the segments are relative to.
        output_dir: Directory the rendered routes file lives in; the
            component reference is relative to it.
        extension: Page file extension to strip.
    """
    file_str = _posix(file)
    root = _posix(pages_dir).rstrip("/")

    relative = file_str[len(root):] if file_str.startswith(root + "/") else file_str
    relative = relative.removesuffix(extension)
    relative = _SEPARATORS_RE.sub("/", relative)
    segments = tuple(relative.strip("/").split("/")) if relative.strip("/") else ()

    if any(segment.startswith(DELETED_PREFIX) for segment in segments):
        logger.debug("Skipping soft-deleted page %s", file_str)
        return None
    if not segments:
        logger.warning("Skipping page %s: no route segments under %s", file_str, root)
        return None

    return PageTokens(segments=segments, component=component_reference(file, output_dir))


def component_reference(file: str | Path, output_dir: str | Path) -> str:
    """Path of *file* relative to *output_dir*, as a ``./``-style import path."""
    relative = os.path.relpath(file, output_dir).replace("\\", "/")
    if relative.startswith(("./", "../")):
        return relative
    return "./" + relative


def _posix(path: str | Path) -> str:
    return str(path).replace("\\", "/")
