"""``pageroutes watch`` — keep the routes file in sync with the pages directory.

Builds once, then rebuilds on every added or removed page until
interrupted with Ctrl+C.
"""

import argparse

import anyio

from pageroutes.cli._config import config_from_args, fail
from pageroutes.watch import RouteWatcher


def run_watch(args: argparse.Namespace) -> None:
    """Start watching ``args.pages_dir``."""
    config = config_from_args(args, watch_interval=args.interval)
    watcher = RouteWatcher(config)
    try:
        anyio.run(watcher.run)
    except FileNotFoundError as exc:
        fail(exc)
    except KeyboardInterrupt:
        pass
