"""Sequential warm-up driver.

Requests every discovered route exactly once against the dev server,
shortest paths first, with a cooldown between requests.  A failed
request is reported and skipped; it never stops the run.
"""

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import httpx

from pagewarm.config import WarmConfig
from pagewarm.warmup.wait import FixedDelay, WaitStrategy


@dataclass(frozen=True, slots=True)
class WarmupResult:
    """Outcome of warming a single route.

    Attributes:
        route: The route that was requested (e.g. ``/about``).
        url: Absolute URL the request went to.
        status: HTTP status code, or ``None`` if no response arrived.
        reason: HTTP reason phrase (e.g. ``"OK"``).
        elapsed: Seconds from sending the request to receiving the status.
        error: Description of the transport error, if any.
    """

    route: str
    url: str
    status: int | None = None
    reason: str = ""
    elapsed: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the server answered at all (any status counts)."""
        return self.status is not None


def order_routes(routes: Iterable[str]) -> list[str]:
    """Order routes by length, shortest first.

    Shorter paths are usually shallower, so shared layouts compile once on
    the way down.  The sort is stable: equal-length routes keep their
    incoming order.
    """
    return sorted(routes, key=len)


def warm_routes(
    routes: Iterable[str],
    config: WarmConfig | None = None,
    *,
    client: httpx.Client | None = None,
    wait: WaitStrategy | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> list[WarmupResult]:
    """Request every route once, sequentially, and print progress.

    Args:
        routes: Canonical routes from discovery.
        config: Target and timing.  Defaults to ``WarmConfig()``.
        client: HTTP client to use.  When omitted, one is created with
            ``config.timeout`` and closed before returning.
        wait: Pause between requests.  Defaults to
            ``FixedDelay(config.delay)``.
        clock: Monotonic clock used to time each request.

    Returns:
        One :class:`WarmupResult` per route, in request order.
    """
    cfg = config or WarmConfig()
    ordered = order_routes(routes)

    if not ordered:
        print("No static routes found to warm up.")
        return []

    pacer = wait if wait is not None else FixedDelay(cfg.delay)
    print(f"Found {len(ordered)} static routes. Warming them up...\n")

    owns_client = client is None
    http = client if client is not None else httpx.Client(timeout=cfg.timeout)
    results: list[WarmupResult] = []
    try:
        for index, route in enumerate(ordered):
            if index:
                pacer.pause()
            results.append(_warm_one(http, cfg, route, clock))
    finally:
        if owns_client:
            http.close()

    succeeded = sum(1 for r in results if r.ok)
    print("\nWarm-up complete.")
    print(f"{succeeded} succeeded, {len(results) - succeeded} failed")
    return results


def _warm_one(
    client: httpx.Client,
    config: WarmConfig,
    route: str,
    clock: Callable[[], float],
) -> WarmupResult:
    """Issue one GET, report it, and never raise for a failed request."""
    url = config.base_url + route
    print(f"GET {url} ... ", end="", flush=True)

    start = clock()
    try:
        # Only the status line matters; the body is never read.
        with client.stream("GET", url, timeout=config.timeout) as response:
            status = response.status_code
            reason = response.reason_phrase
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        print(f"Error: {_describe(exc)}")
        return WarmupResult(route=route, url=url, error=_describe(exc))

    elapsed = clock() - start
    print(f"[{status} {reason}] in {_format_duration(elapsed)}")
    return WarmupResult(route=route, url=url, status=status, reason=reason, elapsed=elapsed)


def _describe(exc: httpx.HTTPError | httpx.InvalidURL) -> str:
    """Error text for the console; some httpx errors have an empty message."""
    return str(exc) or type(exc).__name__


def _format_duration(seconds: float) -> str:
    """Millisecond-rounded duration, or seconds once past one second."""
    ms = round(seconds * 1000)
    if ms < 1000:
        return f"{ms}ms"
    return f"{ms / 1000:.3f}s"
