"""pagewarm CLI — discover static App Router pages and warm them up.

Entry point registered as ``pagewarm`` in ``pyproject.toml``::

    [project.scripts]
    pagewarm = "pagewarm.cli:main"
"""

import argparse

from pagewarm.cli._options import add_discovery_options, add_request_options


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagewarm`` command."""
    parser = argparse.ArgumentParser(
        prog="pagewarm",
        description="pagewarm — warm up a Next.js dev server one static page at a time.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pagewarm warm ----------------------------------------------------
    warm_parser = subparsers.add_parser(
        "warm", help="Discover static routes and request each once (default)"
    )
    add_discovery_options(warm_parser)
    add_request_options(warm_parser)

    # -- pagewarm routes --------------------------------------------------
    routes_parser = subparsers.add_parser(
        "routes", help="List discovered static routes without requesting them"
    )
    add_discovery_options(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        # Bare ``pagewarm`` warms with the defaults
        args = warm_parser.parse_args([])
        args.command = "warm"

    if args.command == "warm":
        from pagewarm.cli._warm import run_warm

        run_warm(args)
    elif args.command == "routes":
        from pagewarm.cli._routes import run_routes

        run_routes(args)
