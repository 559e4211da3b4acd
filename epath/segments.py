from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Sequence, Tuple

from .geometry import Point, format_point

SegmentKind = Literal["move", "line", "quad", "cubic", "close"]

# number of points carried by each kind; the last one is the destination
_POINT_COUNTS: Dict[str, int] = {
    "move": 1,
    "line": 1,
    "quad": 2,
    "cubic": 3,
    "close": 0,
}


@dataclass(frozen=True)
class Segment:
    """One drawing instruction of a sub-path.

    A segment never stores where it starts: its start is the destination of
    the segment before it.
    """

    kind: SegmentKind
    points: Tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        expected = _POINT_COUNTS.get(self.kind)
        if expected is None:
            raise ValueError(f"unknown segment kind {self.kind!r}")
        points = tuple((float(p[0]), float(p[1])) for p in self.points)
        if len(points) != expected:
            raise ValueError(
                f"{self.kind} segment takes {expected} point(s), got {len(points)}"
            )
        object.__setattr__(self, "points", points)

    @classmethod
    def move(cls, point: Point) -> "Segment":
        return cls("move", (point,))

    @classmethod
    def line(cls, point: Point) -> "Segment":
        return cls("line", (point,))

    @classmethod
    def quad(cls, control: Point, destination: Point) -> "Segment":
        return cls("quad", (control, destination))

    @classmethod
    def cubic(cls, control1: Point, control2: Point, destination: Point) -> "Segment":
        return cls("cubic", (control1, control2, destination))

    @classmethod
    def close(cls) -> "Segment":
        return cls("close", ())

    @property
    def is_curve(self) -> bool:
        return self.kind in ("quad", "cubic")

    @property
    def is_close(self) -> bool:
        return self.kind == "close"

    @property
    def destination(self) -> Point:
        if self.kind == "close":
            raise ValueError("close segment has no destination")
        return self.points[-1]

    @property
    def controls(self) -> Tuple[Point, ...]:
        """Control points of a curve, empty for every other kind."""

        return self.points[:-1] if self.is_curve else ()

    def with_destination(self, destination: Point) -> "Segment":
        if self.kind == "close":
            return self
        return Segment(self.kind, self.points[:-1] + (destination,))

    def __str__(self) -> str:
        if self.kind == "move":
            return f"move to {format_point(self.points[0])}"
        if self.kind == "line":
            return f"line to {format_point(self.points[0])}"
        if self.kind == "quad":
            return (
                f"quad curve to {format_point(self.points[1])}"
                f" [c: {format_point(self.points[0])}]"
            )
        if self.kind == "cubic":
            return (
                f"cubic curve to {format_point(self.points[2])}"
                f" [c1: {format_point(self.points[0])}, c2: {format_point(self.points[1])}]"
            )
        if self.kind == "close":
            return "close subpath"
        raise ValueError(f"unknown segment kind {self.kind!r}")


def segments_from_points(points: Sequence[Point]) -> Tuple[Segment, ...]:
    """Closed polyline through ``points``: a move, lines, then close."""

    if not points:
        return ()
    segments = [Segment.move(points[0])]
    segments.extend(Segment.line(p) for p in points[1:])
    segments.append(Segment.close())
    return tuple(segments)


__all__ = [
    "Segment",
    "SegmentKind",
    "segments_from_points",
]
