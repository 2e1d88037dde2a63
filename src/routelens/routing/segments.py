"""Path segment classification.

Maps one directory name to its semantic kind and URL token::

    "[[...slug]]"  -> OptionalCatchAll  ":slug*?"
    "[...slug]"    -> CatchAll          ":slug*"
    "[slug]"       -> Dynamic           ":slug"
    "(marketing)"  -> Group             (excluded from the URL)
    "@modal"       -> ParallelSlot      (excluded from the URL)
    "blog"         -> Static            "blog"

Rules are checked in that order.  Anything malformed falls through to
Static unchanged.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

_OPTIONAL_CATCH_ALL_RE = re.compile(r"^\[\[\.\.\.(.+)\]\]$")
_CATCH_ALL_RE = re.compile(r"^\[\.\.\.(.+)\]$")
_DYNAMIC_RE = re.compile(r"^\[(.+)\]$")


class SegmentKind(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch-all"
    OPTIONAL_CATCH_ALL = "optional-catch-all"
    GROUP = "group"
    PARALLEL_SLOT = "parallel-slot"


_EXCLUDED_KINDS = frozenset({SegmentKind.GROUP, SegmentKind.PARALLEL_SLOT})


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified path segment.

    Attributes:
        raw: The literal directory name.
        kind: Semantic kind derived from ``raw``.
        name: Parameter, group, or slot name (``None`` for static).
        token: URL token, or ``None`` for kinds excluded from the URL.
    """

    raw: str
    kind: SegmentKind
    name: str | None = None
    token: str | None = None

    @property
    def excluded(self) -> bool:
        return self.kind in _EXCLUDED_KINDS


def classify(segment: str) -> Segment:
    """Classify one path segment by its literal text."""
    if match := _OPTIONAL_CATCH_ALL_RE.match(segment):
        name = match.group(1)
        return Segment(segment, SegmentKind.OPTIONAL_CATCH_ALL, name, f":{name}*?")
    if match := _CATCH_ALL_RE.match(segment):
        name = match.group(1)
        return Segment(segment, SegmentKind.CATCH_ALL, name, f":{name}*")
    if match := _DYNAMIC_RE.match(segment):
        name = match.group(1)
        return Segment(segment, SegmentKind.DYNAMIC, name, f":{name}")
    if len(segment) >= 2 and segment.startswith("(") and segment.endswith(")"):
        return Segment(segment, SegmentKind.GROUP, segment[1:-1])
    if segment.startswith("@"):
        return Segment(segment, SegmentKind.PARALLEL_SLOT, segment[1:])
    return Segment(segment, SegmentKind.STATIC, None, segment)


def route_segments(raw_segments: Iterable[str]) -> list[Segment]:
    """Classify segments and drop empty and URL-excluded ones."""
    return [
        seg
        for seg in (classify(raw) for raw in raw_segments if raw)
        if not seg.excluded
    ]


def build_route_path(segments: Iterable[Segment]) -> str:
    """Join segment tokens into a route path.  No segments yields ``/``."""
    tokens = [seg.token for seg in segments if seg.token is not None]
    if not tokens:
        return "/"
    return "/" + "/".join(tokens)
