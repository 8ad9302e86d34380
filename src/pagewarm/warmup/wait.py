"""Wait strategies — the pause between consecutive warm-up requests.

The driver never sleeps directly; it asks a strategy to ``pause()``.
Tests pass a :class:`FixedDelay` with a recording ``sleep`` or a
:class:`NoDelay` so no real time passes.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class WaitStrategy(Protocol):
    """Anything that can pause between two requests."""

    def pause(self) -> None: ...


@dataclass(frozen=True, slots=True)
class FixedDelay:
    """Sleep the same number of seconds every time.

    A cooldown for a dev server compiling pages on demand, not a backoff.

    Attributes:
        seconds: How long each pause lasts.
        sleep: Sleep function.  ``None`` means :func:`time.sleep`,
            looked up at pause time.
    """

    seconds: float
    sleep: Callable[[float], object] | None = field(default=None, repr=False)

    def pause(self) -> None:
        if self.seconds <= 0:
            return
        sleep = self.sleep if self.sleep is not None else time.sleep
        sleep(self.seconds)


@dataclass(frozen=True, slots=True)
class NoDelay:
    """Never wait."""

    def pause(self) -> None:
        return None
