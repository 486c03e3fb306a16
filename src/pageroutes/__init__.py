"""Pageroutes — compile a pages directory into a client-side route table.

Directory nesting becomes route nesting, ``_name`` segments become
dynamic parameters, ``!`` hides a page, and ``index`` pages become their
folder's default route.

Basic usage::

    from pageroutes import RoutesConfig, write_routes

    config = RoutesConfig(pages_dir="src/pages")
    write_routes(config)  # -> src/routes.js

Compile without touching the output file::

    from pageroutes import compile_routes, discover_page_files

    files = discover_page_files(config.pages_dir)
    routes = compile_routes(files, config)
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "PageRoutesError",
    "RouteNode",
    "RouteTreeBuilder",
    "RouteWatcher",
    "RoutesConfig",
    "clean_children_routes",
    "compile_routes",
    "discover_page_files",
    "render_routes",
    "sort_routes",
    "write_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pageroutes`` fast while providing a clean top-level API.
    """
    if name == "RoutesConfig":
        from pageroutes.config import RoutesConfig

        return RoutesConfig

    if name == "compile_routes":
        from pageroutes.compiler import compile_routes

        return compile_routes

    if name == "discover_page_files":
        from pageroutes.discovery import discover_page_files

        return discover_page_files

    if name in ("render_routes", "write_routes"):
        from pageroutes import render as _render

        return getattr(_render, name)

    if name == "RouteWatcher":
        from pageroutes.watch import RouteWatcher

        return RouteWatcher

    if name == "RouteNode":
        from pageroutes.routing.node import RouteNode

        return RouteNode

    if name == "RouteTreeBuilder":
        from pageroutes.routing.builder import RouteTreeBuilder

        return RouteTreeBuilder

    if name == "sort_routes":
        from pageroutes.routing.sorting import sort_routes

        return sort_routes

    if name == "clean_children_routes":
        from pageroutes.routing.normalize import clean_children_routes

        return clean_children_routes

    if name in ("ConfigurationError", "PageRoutesError"):
        from pageroutes import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
