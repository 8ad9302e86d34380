"""Flags shared by the ``warm`` and ``routes`` subcommands.

Also turns parsed flags into a :class:`WarmConfig` and an app
directory, and sets up logging for the commands.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from pagewarm.config import WarmConfig
from pagewarm.errors import PagewarmError
from pagewarm.routes.discovery import find_app_directory


def add_discovery_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=None,
        help="App directory to scan (default: ./app, then ./src/app)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide discovery and skip notices",
    )


def add_request_options(parser: argparse.ArgumentParser) -> None:
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--base-url",
        default=None,
        help="Dev server base URL (default: http://localhost:3000)",
    )
    target.add_argument("--port", type=int, default=None, help="Dev server port on localhost")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: 15)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait between requests (default: 1)",
    )


def configure_logging(args: argparse.Namespace) -> None:
    """Plain ``message`` lines on stderr, like the rest of the CLI output."""
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    # Keep per-request chatter from the HTTP stack out of the progress lines
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_config(args: argparse.Namespace) -> WarmConfig:
    """Build a :class:`WarmConfig` from whichever flags were given."""
    defaults = WarmConfig()
    timeout = getattr(args, "timeout", None)
    delay = getattr(args, "delay", None)
    timeout = defaults.timeout if timeout is None else timeout
    delay = defaults.delay if delay is None else delay

    port = getattr(args, "port", None)
    if port is not None:
        return WarmConfig.for_port(port, timeout=timeout, delay=delay)

    base_url = getattr(args, "base_url", None) or defaults.base_url
    return WarmConfig(base_url=base_url, timeout=timeout, delay=delay)


def resolve_root(args: argparse.Namespace, config: WarmConfig) -> Path:
    """The ``--root`` directory if given, else the conventional app directory."""
    if args.root is not None:
        return Path(args.root)
    return find_app_directory(candidates=config.app_dirs)


def fail(exc: PagewarmError) -> NoReturn:
    """Report a fatal error and exit non-zero."""
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc
