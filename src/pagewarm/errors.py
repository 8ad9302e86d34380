"""pagewarm exception hierarchy.

Shared across discovery, the warm-up driver, and the CLI so every module
raises and catches the same types.
"""


class PagewarmError(Exception):
    """Base for all pagewarm-specific errors."""


class ConfigurationError(PagewarmError):
    """Raised when a ``WarmConfig`` value is invalid."""


class AppDirectoryNotFoundError(PagewarmError):
    """No ``app`` directory where one was expected.

    Fatal: raised before any route is discovered.
    """


class RouteDiscoveryError(PagewarmError):
    """Walking the app directory failed.

    Wraps the underlying ``OSError`` (available as ``__cause__``).
    Discovery is all-or-nothing, so no partial route list accompanies it.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not discover routes under {path}: {reason}")
