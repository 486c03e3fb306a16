"""Config resolution — builds a RoutesConfig from parsed CLI arguments.

Shared by ``pageroutes build``, ``watch``, and ``show``.  Errors are
reported on stderr and exit with code 1.
"""

import argparse
import sys
from typing import Any, NoReturn

from pageroutes.config import RoutesConfig, load_mixin_file
from pageroutes.errors import ConfigurationError


def config_from_args(args: argparse.Namespace, **overrides: Any) -> RoutesConfig:
    """Build a validated RoutesConfig from CLI arguments."""
    try:
        mixin = load_mixin_file(args.mixin) if args.mixin else {}
        return RoutesConfig(
            pages_dir=args.pages_dir,
            output_dir=args.output_dir,
            output_file=args.output_file,
            extension=args.extension,
            mixin=mixin,
            **overrides,
        )
    except ConfigurationError as exc:
        fail(exc)


def fail(exc: Exception) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc
