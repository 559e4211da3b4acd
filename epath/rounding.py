"""Corner rounding of sub-paths.

Every vertex accepted by the rounding rule is cut back by ``radius`` on both
adjoining segments and the gap is bridged with a quadratic blend whose control
point is the original vertex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from .bezier import CubicBezier, QuadBezier
from .config import get_curve_config
from .geometry import Line, Point, cross, turn_angle
from .logging_utils import apply_debug_logging
from .segments import Segment
from .subpath import SubPath

logger = logging.getLogger(__name__)

RoundingRule = Literal["left", "right", "all"]

ROUNDING_RULES: Tuple[str, ...] = ("left", "right", "all")

_DRAWING_KINDS = ("line", "quad", "cubic")


@dataclass
class RoundingWarning:
    """A sub-path that rounding returned unchanged."""

    kind: str
    message: str
    subpath: int = 0

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


def rule_accepts(rule: RoundingRule, turn: float) -> bool:
    """Whether a vertex whose turn cross product is ``turn`` gets rounded."""

    if rule == "left":
        return turn < 0
    if rule == "right":
        return turn > 0
    if rule == "all":
        return turn != 0
    raise ValueError(f"unknown rounding rule {rule!r}; expected one of {ROUNDING_RULES}")


def classify_turn(turn: float) -> str:
    if turn > 0:
        return "right"
    if turn < 0:
        return "left"
    return "colinear"


@dataclass
class _RoundingContext:
    subpath: SubPath
    radius: float
    rule: RoundingRule
    min_curve_turn: float
    steps: int
    tolerance: float


def _point_before_end(ctx: _RoundingContext, segment: Segment, a: Point, o: Point) -> Point:
    if segment.kind == "line":
        return Line(a, o).point_from_end(ctx.radius)
    if segment.kind == "quad":
        curve = QuadBezier(a, segment.points[0], o)
        return curve.point_from_end(ctx.radius, ctx.steps, ctx.tolerance)
    if segment.kind == "cubic":
        curve = CubicBezier(a, segment.points[0], segment.points[1], o)
        return curve.point_from_end(ctx.radius, ctx.steps, ctx.tolerance)
    raise ValueError(f"cannot shorten {segment.kind} segment")


def _point_after_start(ctx: _RoundingContext, segment: Segment, o: Point, b: Point) -> Point:
    if segment.kind == "line":
        return Line(o, b).point_from_start(ctx.radius)
    if segment.kind == "quad":
        curve = QuadBezier(o, segment.points[0], b)
        return curve.point_at_length(ctx.radius, ctx.steps, ctx.tolerance)
    if segment.kind == "cubic":
        curve = CubicBezier(o, segment.points[0], segment.points[1], b)
        return curve.point_at_length(ctx.radius, ctx.steps, ctx.tolerance)
    raise ValueError(f"cannot shorten {segment.kind} segment")


def _round_vertex(ctx: _RoundingContext, prev_index: int, next_index: int) -> List[Segment]:
    """Segments replacing ``prev_index`` up to the blend into ``next_index``.

    Returns the incoming segment alone when the vertex is not rounded, or the
    shortened incoming segment followed by the blend.
    """

    subpath = ctx.subpath
    incoming = subpath[prev_index]
    outgoing = subpath[next_index]
    if incoming.kind not in _DRAWING_KINDS or outgoing.kind not in _DRAWING_KINDS:
        return [incoming]

    ao = subpath.destination_vector(prev_index)
    ob = subpath.start_vector(next_index)
    turn = cross(ao, ob)
    if not rule_accepts(ctx.rule, turn):
        return [incoming]

    angle = turn_angle(ao, ob)
    if incoming.is_curve and outgoing.is_curve and abs(angle) < ctx.min_curve_turn:
        return [incoming]

    a = subpath.start_point(prev_index)
    o = subpath.destination_point(prev_index)
    b = subpath.destination_point(next_index)
    logger.debug(
        "Rounding %s turn of %.3f rad at %s between segments %d and %d",
        classify_turn(turn),
        angle,
        o,
        prev_index,
        next_index,
    )

    shortened = incoming.with_destination(_point_before_end(ctx, incoming, a, o))
    blend = Segment.quad(o, _point_after_start(ctx, outgoing, o, b))
    return [shortened, blend]


def _first_drawing_index(subpath: SubPath) -> Optional[int]:
    for idx, segment in enumerate(subpath):
        if segment.kind in _DRAWING_KINDS:
            return idx
    return None


def _close_with_round(ctx: _RoundingContext, out: List[Segment], prev_index: int) -> bool:
    """Round the vertex where the contour wraps around and finish ``out``."""

    next_index = _first_drawing_index(ctx.subpath)
    if next_index is None:
        out.append(Segment.close())
        return False

    closing = _round_vertex(ctx, prev_index, next_index)
    rounded = len(closing) > 1
    if rounded:
        # the contour now starts where the closing blend ends
        out[0] = Segment.move(closing[-1].destination)
    out.extend(closing)
    out.append(Segment.close())
    return rounded


def round_subpath(
    subpath: SubPath,
    radius: float,
    rule: RoundingRule = "all",
    *,
    min_curve_turn: Optional[float] = None,
    steps: Optional[int] = None,
    tolerance: Optional[float] = None,
) -> Tuple[SubPath, List[RoundingWarning]]:
    """Round the vertices of ``subpath`` selected by ``rule``.

    Sub-paths that are too short, or that do not start with ``move`` and end
    with ``close``, are returned unchanged together with a warning.
    """

    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    if rule not in ROUNDING_RULES:
        raise ValueError(f"unknown rounding rule {rule!r}; expected one of {ROUNDING_RULES}")

    segments = subpath.segments
    if len(segments) <= 3:
        return subpath, [
            RoundingWarning(
                kind="too_short",
                message=f"sub-path has {len(segments)} segment(s); rounding needs more than 3",
            )
        ]
    if segments[0].kind != "move" or not segments[-1].is_close:
        return subpath, [
            RoundingWarning(
                kind="malformed",
                message="sub-path must start with move and end with close to be rounded",
            )
        ]

    config = get_curve_config()
    ctx = _RoundingContext(
        subpath=subpath,
        radius=float(radius),
        rule=rule,
        min_curve_turn=config.min_curve_turn if min_curve_turn is None else min_curve_turn,
        steps=config.steps if steps is None else steps,
        tolerance=config.tolerance if tolerance is None else tolerance,
    )

    out: List[Segment] = []
    count = len(segments)
    vertices = 0
    rounded = 0
    for idx, segment in enumerate(segments):
        next_index = idx + 1 if idx + 1 < count else 0
        if segment.kind == "move":
            out.append(segment)
            continue
        if segments[next_index].is_close:
            continue
        if segment.is_close:
            vertices += 1
            rounded += _close_with_round(ctx, out, idx - 1)
            break
        piece = _round_vertex(ctx, idx, next_index)
        vertices += 1
        rounded += len(piece) > 1
        out.extend(piece)

    logger.debug("Rounded %d of %d vertices with radius %.3f (%s)", rounded, vertices, radius, rule)
    return SubPath(out), []


apply_debug_logging(globals(), logger=logger, skip={"rule_accepts", "classify_turn"})


__all__ = [
    "ROUNDING_RULES",
    "RoundingRule",
    "RoundingWarning",
    "classify_turn",
    "round_subpath",
    "rule_accepts",
]
