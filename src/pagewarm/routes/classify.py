"""Segment classification for App Router directory paths.

Pure functions, no filesystem access: a relative directory path goes in,
a :class:`Keep` or :class:`Skip` comes out.
"""

from collections.abc import Iterable

from pagewarm.routes.types import Keep, Resolution, SegmentKind, Skip

_INTERCEPTOR_MARKERS = ("(...)", "(..)", "(.)")

_SKIP_REASONS = {
    SegmentKind.PRIVATE: "path with private segment",
    SegmentKind.INTERCEPTOR: "intercepting route",
    SegmentKind.PARALLEL_SLOT: "parallel route slot",
    SegmentKind.DYNAMIC: "dynamic route",
}


def classify_segment(segment: str) -> SegmentKind:
    """Classify one directory name.

    Only the bare markers ``(.)``, ``(..)`` and ``(...)`` are interceptors;
    any other parenthesized name is a route group.
    """
    if segment.startswith("_"):
        return SegmentKind.PRIVATE
    if segment in _INTERCEPTOR_MARKERS:
        return SegmentKind.INTERCEPTOR
    if segment.startswith("@"):
        return SegmentKind.PARALLEL_SLOT
    if segment.startswith("[") and segment.endswith("]"):
        return SegmentKind.DYNAMIC
    if segment.startswith("(") and segment.endswith(")"):
        return SegmentKind.GROUP
    return SegmentKind.PLAIN


def classify_path(segments: Iterable[str]) -> Resolution:
    """Resolve a sequence of directory names to a canonical route.

    Empty segments are ignored.  The first disqualifying segment wins;
    route groups are dropped and plain segments kept in order.
    """
    kept: list[str] = []
    for segment in segments:
        if not segment:
            continue
        kind = classify_segment(segment)
        if kind.disqualifies:
            return Skip(reason=_SKIP_REASONS[kind], segment=segment, kind=kind)
        if kind is SegmentKind.PLAIN:
            kept.append(segment)
    return Keep(route="/" + "/".join(kept))


def route_for_directory(relative: str) -> Resolution:
    """Classify a ``/``-separated directory path relative to the app root.

    ``""`` and ``"."`` both denote the app root itself, which is ``/``.
    """
    if relative in ("", "."):
        return Keep(route="/")
    return classify_path(relative.split("/"))
