"""pagewarm — warm up a Next.js dev server before anyone visits it.

Finds every statically-routable page under ``app/`` (or ``src/app/``)
and requests each one once, shortest routes first, so the first-compile
cost is paid ahead of time.

Basic usage::

    from pagewarm import WarmConfig, discover_routes, find_app_directory, warm_routes

    routes = discover_routes(find_app_directory())
    warm_routes(routes, WarmConfig(base_url="http://localhost:3000"))

Or from the shell::

    pagewarm --port 3000
"""

__version__ = "0.1.0"
__all__ = [
    "AppDirectoryNotFoundError",
    "ConfigurationError",
    "PagewarmError",
    "RouteDiscoveryError",
    "WarmConfig",
    "WarmupResult",
    "discover_routes",
    "find_app_directory",
    "warm_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagewarm`` fast (no httpx import) while providing a
    clean top-level API.
    """
    if name == "WarmConfig":
        from pagewarm.config import WarmConfig

        return WarmConfig

    if name in ("discover_routes", "find_app_directory"):
        from pagewarm.routes import discovery as _discovery

        return getattr(_discovery, name)

    if name in ("WarmupResult", "warm_routes"):
        from pagewarm.warmup import driver as _driver

        return getattr(_driver, name)

    if name in (
        "AppDirectoryNotFoundError",
        "ConfigurationError",
        "PagewarmError",
        "RouteDiscoveryError",
    ):
        from pagewarm import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
