"""Vector and line primitives shared by the curve and path code."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

Point = Tuple[float, float]
Vector = Tuple[float, float]

ZERO_VECTOR: Vector = (0.0, 0.0)


class DegenerateVectorError(ValueError):
    """Raised when a direction is requested from a zero-length vector."""


def vector(a: Point, b: Point) -> Vector:
    return b[0] - a[0], b[1] - a[1]


def length(v: Vector) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Point, b: Point) -> float:
    return length(vector(a, b))


def normalized(v: Vector) -> Vector:
    norm = length(v)
    if norm == 0.0:
        raise DegenerateVectorError(f"cannot normalize zero-length vector {v!r}")
    return v[0] / norm, v[1] / norm


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vector, b: Vector) -> float:
    """Return the z component of ``a × b``.

    With the y axis pointing down (screen coordinates) a positive value is a
    right turn from ``a`` to ``b``, a negative value a left turn and zero means
    the vectors are colinear.
    """

    return a[0] * b[1] - a[1] * b[0]


def turn_angle(a: Vector, b: Vector) -> float:
    """Signed angle in radians turning from ``a`` to ``b``."""

    return math.atan2(cross(a, b), dot(a, b))


def translate(p: Point, offset: Vector) -> Point:
    return p[0] + offset[0], p[1] + offset[1]


@dataclass(frozen=True)
class Line:
    """Directed line through ``start`` and ``end``."""

    start: Point
    end: Point

    @property
    def vector(self) -> Vector:
        return vector(self.start, self.end)

    @property
    def length(self) -> float:
        return length(self.vector)

    def reversed(self) -> "Line":
        return Line(self.end, self.start)

    def point_from_start(self, dist: float) -> Point:
        ux, uy = normalized(self.vector)
        return self.start[0] + ux * dist, self.start[1] + uy * dist

    def point_from_end(self, dist: float) -> Point:
        ux, uy = normalized(self.vector)
        return self.end[0] - ux * dist, self.end[1] - uy * dist

    def intersection(self, other: "Line") -> Optional[Point]:
        """Intersection of the two infinite lines, ``None`` when parallel."""

        p1, p2 = self.start, self.end
        p3, p4 = other.start, other.end

        a1 = p2[1] - p1[1]
        b1 = p1[0] - p2[0]
        c1 = a1 * p1[0] + b1 * p1[1]

        a2 = p4[1] - p3[1]
        b2 = p3[0] - p4[0]
        c2 = a2 * p3[0] + b2 * p3[1]

        det = a1 * b2 - a2 * b1
        if abs(det) < sys.float_info.epsilon:
            return None

        x = (b2 * c1 - b1 * c2) / det
        y = (a1 * c2 - a2 * c1) / det
        return x, y

    def __str__(self) -> str:
        return f"from {format_point(self.start)} to {format_point(self.end)}"


def format_point(p: Point, precision: int = 2) -> str:
    return f"({p[0]:.{precision}f}, {p[1]:.{precision}f})"


__all__ = [
    "Point",
    "Vector",
    "ZERO_VECTOR",
    "DegenerateVectorError",
    "Line",
    "cross",
    "distance",
    "dot",
    "format_point",
    "length",
    "normalized",
    "translate",
    "turn_angle",
    "vector",
]
