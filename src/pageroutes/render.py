"""Route tree rendering.

Renders the normalized tree into an ES module for a client-side router
using the packaged kida template ``templates/routes.js``.  Components
are loaded lazily (``() => import(...)``).
"""

import json
import logging
from collections.abc import Sequence
from typing import Any

from kida import Environment, PackageLoader

from pageroutes.compiler import compile_routes
from pageroutes.config import RoutesConfig
from pageroutes.discovery import discover_page_files
from pageroutes.routing.node import LEADING_OPTIONS, RouteNode

logger = logging.getLogger("pageroutes.render")

TEMPLATE_NAME = "routes.js"


def route_literals(routes: Sequence[RouteNode], tab: str = "\t") -> str:
    """Render route nodes as comma-separated JS object literals."""
    return ",\n".join(_route_literal(route, tab) for route in routes)


def _route_literal(route: RouteNode, tab: str) -> str:
    fields = [f"path: {_js(route.path)}"]
    if route.component:
        fields.append(f"component: () => import({_js(route.component)})")
    for key, value in route.present_options():
        label = key if key in LEADING_OPTIONS else _js(key)
        fields.append(f"{label}: {_js(value)}")
    if route.name:
        fields.append(f"name: {_js(route.name)}")
    if route.children:
        nested = route_literals(route.children, tab + "\t\t")
        fields.append(f"children: [\n{nested}\n\t{tab}]")

    body = f",\n\t{tab}".join(fields)
    return f"{tab}{{\n\t{tab}{body}\n{tab}}}"


def _js(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def create_environment() -> Environment:
    """Create the kida Environment that renders route modules."""
    env = Environment(
        loader=PackageLoader("pageroutes", "templates"),
        autoescape=False,
    )
    env.update_filters({"route_literals": route_literals})
    return env


def render_routes(routes: Sequence[RouteNode], env: Environment | None = None) -> str:
    """Render the route tree to router configuration source."""
    env = env or create_environment()
    template = env.get_template(TEMPLATE_NAME)
    return template.render({"routes": list(routes)})


def write_routes(config: RoutesConfig, env: Environment | None = None) -> bool:
    """Discover pages, compile, render, and write ``config.output_path``.

    Parent directories are created as needed.  The file is left alone
    when its content would not change.

    Returns:
        ``True`` if the routes file was written.
    """
    files = discover_page_files(config.pages_root, config.extension)
    content = render_routes(compile_routes(files, config), env)

    output = config.output_path
    if output.is_file() and output.read_text(encoding="utf-8") == content:
        logger.debug("Routes unchanged: %s", output)
        return False

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    logger.info("Wrote routes for %d page files to %s", len(files), output)
    return True
