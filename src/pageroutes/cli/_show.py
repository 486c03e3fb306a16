"""``pageroutes show`` — print the compiled route tree.

Prints an indented table of PATH, NAME, and COMPONENT, or the
serialized tree with ``--json``.
"""

import argparse
import json
from collections.abc import Sequence

from pageroutes.cli._config import config_from_args, fail
from pageroutes.compiler import compile_routes
from pageroutes.discovery import discover_page_files
from pageroutes.routing.node import RouteNode


def run_show(args: argparse.Namespace) -> None:
    """Compile the pages directory and print the route tree."""
    config = config_from_args(args)
    try:
        files = discover_page_files(config.pages_root, config.extension)
    except FileNotFoundError as exc:
        fail(exc)

    routes = compile_routes(files, config)
    if args.json:
        print(json.dumps([route.to_dict() for route in routes], indent=2, ensure_ascii=False))
        return
    if not routes:
        print("No routes found.")
        return

    # Build rows: (indented path, name, component)
    rows: list[tuple[str, str, str]] = []
    _collect_rows(routes, 0, rows)

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_path}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATH", "NAME", "COMPONENT"))
    sep_len = max_path + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, name, component in rows:
        print(fmt.format(path, name, component))


def _collect_rows(
    routes: Sequence[RouteNode],
    depth: int,
    rows: list[tuple[str, str, str]],
) -> None:
    for route in routes:
        path = route.path if route.path else '""'
        rows.append(("  " * depth + path, route.name or "-", route.component or "-"))
        _collect_rows(route.children, depth + 1, rows)
