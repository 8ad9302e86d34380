"""Data models for route classification.

A candidate page directory is split into segments, each segment gets a
:class:`SegmentKind`, and the whole path resolves to either :class:`Keep`
or :class:`Skip`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class SegmentKind(Enum):
    """What a single directory name means to the App Router."""

    PLAIN = "plain"
    PRIVATE = "private"  # _components
    GROUP = "group"  # (marketing)
    INTERCEPTOR = "interceptor"  # (.) (..) (...)
    PARALLEL_SLOT = "parallel slot"  # @team
    DYNAMIC = "dynamic"  # [id], [...slug], [[...slug]]

    @property
    def disqualifies(self) -> bool:
        """Whether one segment of this kind rules out the whole path."""
        return self in _DISQUALIFYING


_DISQUALIFYING = frozenset(
    {
        SegmentKind.PRIVATE,
        SegmentKind.INTERCEPTOR,
        SegmentKind.PARALLEL_SLOT,
        SegmentKind.DYNAMIC,
    }
)


@dataclass(frozen=True, slots=True)
class Keep:
    """A candidate path that maps to a public, parameter-free URL.

    Attributes:
        route: Canonical URL path (e.g. ``/blog``, or ``/`` for the root).
    """

    route: str


@dataclass(frozen=True, slots=True)
class Skip:
    """A candidate path ruled out by one of its segments.

    Attributes:
        reason: Human-readable explanation for log output.
        segment: The first disqualifying segment.
        kind: Classification of that segment.
    """

    reason: str
    segment: str
    kind: SegmentKind


Resolution: TypeAlias = Keep | Skip
