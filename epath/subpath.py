"""Sub-path: a single closed contour made of segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Tuple

from .config import get_curve_config
from .geometry import Line, Point, Vector, distance
from .segments import Segment

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .rounding import RoundingRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubPath:
    """Ordered segments of one contour.

    A well formed sub-path starts with ``move`` and ends with ``close``. On
    construction a gap between the last destination and the starting point is
    bridged with an explicit line, so the contour is geometrically closed and
    not only nominally closed.
    """

    segments: Tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        self._close_gap(get_curve_config().closing_tolerance)

    def _close_gap(self, tolerance: float) -> None:
        segments = self.segments
        if len(segments) < 3 or segments[0].is_close or not segments[-1].is_close:
            return
        start = self.start_point(0)
        end = self.destination_point(len(segments) - 2)
        if distance(end, start) <= tolerance:
            return
        logger.debug("Bridging closing gap %s -> %s with a line", end, start)
        object.__setattr__(
            self, "segments", segments[:-1] + (Segment.line(start), Segment.close())
        )

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def is_well_formed(self) -> bool:
        return (
            len(self.segments) >= 3
            and self.segments[0].kind == "move"
            and self.segments[-1].is_close
        )

    def _wrap_prev(self, index: int) -> int:
        return index - 1 if index - 1 >= 0 else len(self.segments) - 1

    def destination_point(self, index: int) -> Point:
        """Endpoint of segment ``index``.

        ``close`` carries no coordinate, so its endpoint is the destination of
        the segment after it, or of the first segment when it is the last one.
        """

        segment = self.segments[index]
        if not segment.is_close:
            return segment.destination
        following = index + 1
        if following < len(self.segments) and not self.segments[following].is_close:
            return self.segments[following].destination
        first = self.segments[0]
        if first.is_close:
            raise ValueError("sub-path has no anchor point before close")
        return first.destination

    def start_point(self, index: int) -> Point:
        return self.destination_point(self._wrap_prev(index))

    def start_chord(self, index: int) -> Line:
        """Chord leaving the start point of segment ``index``."""

        segment = self.segments[index]
        if segment.kind == "move":
            return Line(segment.destination, segment.destination)
        prev = self.start_point(index)
        if segment.is_curve:
            return Line(prev, segment.points[0])
        if segment.kind in ("line", "close"):
            return Line(prev, self.destination_point(index))
        raise ValueError(f"unknown segment kind {segment.kind!r}")

    def destination_chord(self, index: int) -> Line:
        """Chord arriving at the destination of segment ``index``."""

        segment = self.segments[index]
        if segment.kind == "move":
            return Line(segment.destination, segment.destination)
        if segment.is_curve:
            return Line(segment.points[-2], segment.points[-1])
        if segment.kind in ("line", "close"):
            return self.start_chord(index).reversed()
        raise ValueError(f"unknown segment kind {segment.kind!r}")

    def start_vector(self, index: int) -> Vector:
        return self.start_chord(index).vector

    def destination_vector(self, index: int) -> Vector:
        segment = self.segments[index]
        if segment.kind in ("line", "close"):
            # direction of travel, not the reversed chord
            return self.start_vector(index)
        return self.destination_chord(index).vector

    def chord_length(self, index: int) -> float:
        """Straight distance covered by segment ``index``."""

        return distance(self.start_point(index), self.destination_point(index))

    def thinned(self, min_length: float = 1.0) -> "SubPath":
        from .thinning import thin_subpath

        return thin_subpath(self, min_length)

    def rounded(self, radius: float, rule: "RoundingRule" = "all") -> "SubPath":
        """Rounded copy; rounding diagnostics go to the log."""

        from .rounding import round_subpath

        result, warnings = round_subpath(self, radius, rule)
        for warning in warnings:
            logger.warning("Rounding skipped: %s", warning)
        return result

    def __str__(self) -> str:
        return "\n".join(f"{idx}: {segment}" for idx, segment in enumerate(self.segments))


__all__ = [
    "SubPath",
]
