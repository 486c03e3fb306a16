"""Page files to normalized route tree.

A pure function of the file list and configuration: identical input
yields an identical tree regardless of file order.  Every call builds a
fresh tree.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from pageroutes.config import RoutesConfig
from pageroutes.routing.builder import build_routes
from pageroutes.routing.node import PageTokens, RouteNode
from pageroutes.routing.normalize import clean_children_routes
from pageroutes.routing.tokenize import tokenize_page

logger = logging.getLogger("pageroutes.compiler")


def tokenize_pages(files: Iterable[str | Path], config: RoutesConfig) -> list[PageTokens]:
    """Tokenize every page file, dropping soft-deleted and empty ones."""
    pages_dir = config.pages_root
    output_dir = config.resolved_output_dir
    pages: list[PageTokens] = []
    for file in files:
        page = tokenize_page(
            Path(file).resolve(), pages_dir, output_dir, extension=config.extension
        )
        if page is not None:
            pages.append(page)
    return pages


def compile_routes(files: Iterable[str | Path], config: RoutesConfig) -> list[RouteNode]:
    """Compile page file paths into the normalized route tree.

    Args:
        files: Absolute page file paths under ``config.pages_dir``.
        config: Route generation configuration.

    Returns:
        Root-level routes, each sibling list ordered by match precedence.
    """
    pages = tokenize_pages(files, config)
    routes = clean_children_routes(build_routes(pages, config.mixin))
    logger.debug("Compiled %d pages into %d root routes", len(pages), len(routes))
    return routes
