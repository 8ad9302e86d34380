"""``pagewarm warm`` — discover static routes and request each one.

Setup problems (no app directory, unreadable tree, bad flags) are fatal
and exit 1.  Failed requests are reported per route and the run still
exits 0.
"""

import argparse

from pagewarm.cli._options import build_config, configure_logging, fail, resolve_root
from pagewarm.errors import PagewarmError
from pagewarm.routes.discovery import discover_routes
from pagewarm.warmup.driver import warm_routes


def run_warm(args: argparse.Namespace) -> None:
    """Discover routes under the app directory and warm them up."""
    configure_logging(args)
    try:
        config = build_config(args)
        root = resolve_root(args, config)
        print("Discovering routes...")
        routes = discover_routes(root, extensions=config.page_extensions)
    except PagewarmError as exc:
        fail(exc)

    warm_routes(routes, config)
