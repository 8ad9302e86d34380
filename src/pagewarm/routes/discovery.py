"""Filesystem route discovery for an App Router ``app/`` directory.

Walks the app directory tree and collects every ``page.*`` file with a
recognized source extension.  The directory containing a page file
defines its URL:

- ``app/page.tsx`` maps to ``/``
- ``app/blog/page.tsx`` maps to ``/blog``
- ``app/(marketing)/about/page.tsx`` maps to ``/about`` (groups drop out)

Pages under private (``_lib``), dynamic (``[id]``), parallel (``@modal``)
or intercepting (``(..)``) segments are skipped, since none of them
has a fixed public URL to request.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from pagewarm.errors import AppDirectoryNotFoundError, RouteDiscoveryError
from pagewarm.routes.classify import route_for_directory
from pagewarm.routes.types import Skip

logger = logging.getLogger("pagewarm.routes")

PAGE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")
APP_DIRS = ("app", "src/app")


def is_page_file(name: str, extensions: Iterable[str] = PAGE_EXTENSIONS) -> bool:
    """Whether a file name defines a page (``page.tsx``, ``page.js``, ...)."""
    return name.startswith("page.") and name.endswith(tuple(extensions))


def find_app_directory(
    base: str | Path | None = None,
    candidates: Iterable[str] = APP_DIRS,
) -> Path:
    """Locate the app directory in its conventional locations.

    Args:
        base: Project root to search from.  Defaults to the working directory.
        candidates: Relative locations to try, in order.

    Returns:
        The first candidate that exists as a directory, joined onto *base*.

    Raises:
        AppDirectoryNotFoundError: If none of the candidates is a directory.
    """
    base_path = Path(base) if base is not None else Path()
    tried = tuple(candidates)
    for candidate in tried:
        path = base_path / candidate
        if path.is_dir():
            logger.info("Found app directory at: ./%s", candidate)
            return path

    names = " or ".join(f"'{c}'" for c in tried)
    msg = (
        f"Could not find {names} directory. This tool must be run from "
        "the root of a Next.js app router project."
    )
    raise AppDirectoryNotFoundError(msg)


def discover_routes(
    root: str | Path,
    *,
    extensions: Iterable[str] = PAGE_EXTENSIONS,
) -> list[str]:
    """Walk an app directory and discover all static routes.

    Args:
        root: Path to the ``app/`` directory.
        extensions: File extensions that make a ``page.*`` file count.

    Returns:
        Sorted list of unique canonical routes.  Ordering for warm-up
        is applied separately by the driver.

    Raises:
        AppDirectoryNotFoundError: If *root* is not a directory.
        RouteDiscoveryError: If any directory cannot be read.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise AppDirectoryNotFoundError(f"App directory not found: {root_path}")

    routes: set[str] = set()
    _walk_directory(root_path, root_path, extensions=tuple(extensions), routes=routes)
    return sorted(routes)


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    extensions: tuple[str, ...],
    routes: set[str],
) -> None:
    """Recursively walk a directory, adding the routes of its page files.

    Args:
        directory: Current directory being walked.
        root: App directory (for computing relative paths).
        extensions: Recognized page file extensions.
        routes: Accumulator for discovered routes.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise RouteDiscoveryError(str(directory), exc.strerror or str(exc)) from exc

    for item in entries:
        # Symlinked directories are treated as plain entries, never followed
        try:
            walkable = item.is_dir() and not item.is_symlink()
        except OSError as exc:
            raise RouteDiscoveryError(str(item), exc.strerror or str(exc)) from exc
        if walkable:
            _walk_directory(item, root, extensions=extensions, routes=routes)
            continue
        if not is_page_file(item.name, extensions):
            continue

        relative = item.parent.relative_to(root).as_posix()
        resolution = route_for_directory(relative)
        if isinstance(resolution, Skip):
            logger.info("Skipping %s: /%s", resolution.reason, relative)
            continue
        routes.add(resolution.route)
