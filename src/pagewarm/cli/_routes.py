"""``pagewarm routes`` — list discovered static routes.

Prints one route per line in the order ``pagewarm warm`` would request
them.  No HTTP requests are made.
"""

import argparse

from pagewarm.cli._options import build_config, configure_logging, fail, resolve_root
from pagewarm.errors import PagewarmError
from pagewarm.routes.discovery import discover_routes
from pagewarm.warmup.driver import order_routes


def run_routes(args: argparse.Namespace) -> None:
    """Print the static routes found under the app directory."""
    configure_logging(args)
    try:
        config = build_config(args)
        root = resolve_root(args, config)
        routes = discover_routes(root, extensions=config.page_extensions)
    except PagewarmError as exc:
        fail(exc)

    if not routes:
        print("No static routes found.")
        return

    for route in order_routes(routes):
        print(route)
