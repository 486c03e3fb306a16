"""``pageroutes build`` — write the routes file once."""

import argparse

from pageroutes.cli._config import config_from_args, fail
from pageroutes.render import write_routes


def run_build(args: argparse.Namespace) -> None:
    """Compile the pages directory and write the routes file."""
    config = config_from_args(args)
    try:
        changed = write_routes(config)
    except FileNotFoundError as exc:
        fail(exc)

    state = "written" if changed else "unchanged"
    print(f"{config.output_path} ({state})")
