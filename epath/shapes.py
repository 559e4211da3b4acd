"""Sample contours for demos and tests.

All shapes are in screen coordinates (y grows downwards) and are shifted by
``origin``.
"""

from __future__ import annotations

from typing import List, Tuple

from .geometry import Point, translate
from .segments import Segment
from .subpath import SubPath

Size = Tuple[float, float]


def _shifted(origin: Point, segments: List[Segment]) -> SubPath:
    moved = [
        Segment(segment.kind, tuple(translate(p, origin) for p in segment.points))
        for segment in segments
    ]
    return SubPath(moved)


def rect(origin: Point = (0.0, 0.0), size: Size = (100.0, 200.0)) -> SubPath:
    """Rectangle drawn clockwise on screen: every corner is a right turn."""

    w, h = size
    return _shifted(
        origin,
        [
            Segment.move((0, h)),
            Segment.line((0, 0)),
            Segment.line((w, 0)),
            Segment.line((w, h)),
            Segment.close(),
        ],
    )


def top_round_rect(origin: Point = (0.0, 0.0)) -> SubPath:
    return _shifted(
        origin,
        [
            Segment.move((0, 200)),
            Segment.line((0, 50)),
            Segment.quad((50, 0), (100, 50)),
            Segment.line((100, 200)),
            Segment.close(),
        ],
    )


def cup(origin: Point = (0.0, 0.0)) -> SubPath:
    """Cup outline mixing left and right turns."""

    return _shifted(
        origin,
        [
            Segment.move((0, 200)),
            Segment.line((0, 150)),
            Segment.line((50, 150)),
            Segment.quad((50, 75), (25, 50)),
            Segment.line((100, 50)),
            Segment.quad((75, 75), (75, 150)),
            Segment.line((125, 150)),
            Segment.line((125, 200)),
            Segment.close(),
        ],
    )


def diamond(origin: Point = (0.0, 0.0)) -> SubPath:
    """Four concave quadratic sides pulled towards the centre."""

    center = (100, 100)
    return _shifted(
        origin,
        [
            Segment.move((100, 200)),
            Segment.quad(center, (0, 100)),
            Segment.quad(center, (100, 0)),
            Segment.quad(center, (200, 100)),
            Segment.quad(center, (100, 200)),
            Segment.close(),
        ],
    )


def circle(origin: Point = (0.0, 0.0), size: Size = (200.0, 200.0)) -> SubPath:
    """Ellipse approximated with four quadratic quarters."""

    w, h = size
    return _shifted(
        origin,
        [
            Segment.move((w / 2, h)),
            Segment.quad((0, h), (0, h / 2)),
            Segment.quad((0, 0), (w / 2, 0)),
            Segment.quad((w, 0), (w, h / 2)),
            Segment.quad((w, h), (w / 2, h)),
            Segment.close(),
        ],
    )


def santa_stick(origin: Point = (0.0, 0.0)) -> SubPath:
    return _shifted(
        origin,
        [
            Segment.move((150, 200)),
            Segment.line((150, 100)),
            Segment.quad((100, 50), (50, 100)),
            Segment.quad((20, 100), (30, 70)),
            Segment.quad((120, 10), (180, 100)),
            Segment.line((180, 200)),
            Segment.close(),
        ],
    )


def horseshoe(origin: Point = (0.0, 0.0)) -> SubPath:
    return _shifted(
        origin,
        [
            Segment.move((100, 150)),
            Segment.cubic((50, 150), (0, 120), (0, 50)),
            Segment.quad((12.5, 30), (24, 50)),
            Segment.cubic((25, 150), (175, 150), (175, 50)),
            Segment.cubic((182, 40), (192, 40), (200, 50)),
            Segment.line((175, 125)),
            Segment.close(),
        ],
    )


SHAPES = {
    "rect": rect,
    "top-round-rect": top_round_rect,
    "cup": cup,
    "diamond": diamond,
    "circle": circle,
    "santa-stick": santa_stick,
    "horseshoe": horseshoe,
}


__all__ = [
    "SHAPES",
    "circle",
    "cup",
    "diamond",
    "horseshoe",
    "rect",
    "santa_stick",
    "top_round_rect",
]
