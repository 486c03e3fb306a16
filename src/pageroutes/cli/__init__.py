"""Pageroutes CLI — build, watch, and inspect generated routes.

Entry point registered as ``pageroutes`` in ``pyproject.toml``::

    [project.scripts]
    pageroutes = "pageroutes.cli:main"
"""

import argparse
import logging
import sys


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pages_dir", help="Pages directory (e.g. src/pages)")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the routes file (default: parent of pages_dir)",
    )
    parser.add_argument("--output-file", default="routes.js", help="Routes file name")
    parser.add_argument("--extension", default=".vue", help="Page file extension")
    parser.add_argument(
        "--mixin",
        default=None,
        metavar="FILE",
        help="JSON file mapping mixin names to route fields",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pageroutes`` command."""
    parser = argparse.ArgumentParser(
        prog="pageroutes",
        description="Pageroutes — compile a pages directory into a client-side route table.",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pageroutes build -------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Write the routes file once")
    _add_config_arguments(build_parser)

    # -- pageroutes watch -------------------------------------------------
    watch_parser = subparsers.add_parser(
        "watch", help="Write the routes file and rebuild when pages are added or removed"
    )
    _add_config_arguments(watch_parser)
    watch_parser.add_argument(
        "--interval",
        type=float,
        default=0.5,
        help="Seconds between filesystem polls",
    )

    # -- pageroutes show --------------------------------------------------
    show_parser = subparsers.add_parser("show", help="Print the compiled route tree")
    _add_config_arguments(show_parser)
    show_parser.add_argument("--json", action="store_true", help="Print the tree as JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "build":
        from pageroutes.cli._build import run_build

        run_build(args)
    elif args.command == "watch":
        from pageroutes.cli._watch import run_watch

        run_watch(args)
    elif args.command == "show":
        from pageroutes.cli._show import run_show

        run_show(args)
