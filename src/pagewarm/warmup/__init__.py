"""Sequential warm-up of discovered routes against a dev server.

Usage::

    from pagewarm.config import WarmConfig
    from pagewarm.warmup import warm_routes

    results = warm_routes(["/", "/about"], WarmConfig(delay=0.5))
"""

from pagewarm.warmup.driver import WarmupResult, order_routes, warm_routes
from pagewarm.warmup.wait import FixedDelay, NoDelay, WaitStrategy

__all__ = [
    "FixedDelay",
    "NoDelay",
    "WaitStrategy",
    "WarmupResult",
    "order_routes",
    "warm_routes",
]
