"""Warm-up configuration.

WarmConfig is a frozen dataclass that replaces fixed module constants, so
tests and the CLI can point the driver at any server with any timing.
"""

import math
from dataclasses import dataclass

from pagewarm.errors import ConfigurationError
from pagewarm.routes.discovery import APP_DIRS, PAGE_EXTENSIONS


@dataclass(frozen=True, slots=True)
class WarmConfig:
    """Warm-up configuration. Immutable after creation.

    All fields have sensible defaults for a local Next.js dev server.
    Override what you need::

        config = WarmConfig(base_url="http://localhost:4000", delay=0.5)
    """

    # Target
    base_url: str = "http://localhost:3000"

    # Requests
    timeout: float = 15.0  # First compile of a page can take a while
    delay: float = 1.0  # Cooldown between requests, not a backoff

    # Discovery
    app_dirs: tuple[str, ...] = APP_DIRS
    page_extensions: tuple[str, ...] = PAGE_EXTENSIONS

    def __post_init__(self) -> None:
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            msg = f"timeout must be a positive number, got {self.timeout!r}"
            raise ConfigurationError(msg)
        if not math.isfinite(self.delay) or self.delay < 0:
            msg = f"delay must be a non-negative number, got {self.delay!r}"
            raise ConfigurationError(msg)
        if not self.base_url.startswith(("http://", "https://")):
            msg = f"base_url must be an http(s) URL, got {self.base_url!r}"
            raise ConfigurationError(msg)
        # Routes always start with "/"
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def for_port(cls, port: int, *, timeout: float = 15.0, delay: float = 1.0) -> "WarmConfig":
        """Config targeting ``http://localhost:<port>``."""
        if not 0 < port < 65536:
            msg = f"port must be between 1 and 65535, got {port!r}"
            raise ConfigurationError(msg)
        return cls(base_url=f"http://localhost:{port}", timeout=timeout, delay=delay)
