"""Quadratic and cubic Bézier evaluators with arc-length lookup.

There is no closed form for the inverse arc length of a Bézier curve, so the
length from the start to a parameter ``t`` is measured on a polyline sampled
at ``steps`` uniform parameters and the parameter for a given length is found
by bisection over that measure.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from scipy.integrate import quad

from .config import get_curve_config
from .geometry import Point

logger = logging.getLogger(__name__)


def _resolve(steps: Optional[int], tolerance: Optional[float]) -> Tuple[int, float]:
    config = get_curve_config()
    return (
        config.steps if steps is None else int(steps),
        config.tolerance if tolerance is None else float(tolerance),
    )


class _BezierCurve(ABC):
    """Shared arc-length machinery; subclasses provide the blend functions."""

    @abstractmethod
    def _control_array(self) -> np.ndarray: ...

    @abstractmethod
    def _basis(self, t: np.ndarray) -> np.ndarray: ...

    @abstractmethod
    def _derivative_basis(self, t: np.ndarray) -> np.ndarray: ...

    @property
    @abstractmethod
    def start(self) -> Point: ...

    @property
    @abstractmethod
    def end(self) -> Point: ...

    def _sample(self, ts: np.ndarray) -> np.ndarray:
        return self._basis(ts) @ self._control_array()

    def evaluate(self, t: float) -> Point:
        """Point ``B(t)`` on the curve."""

        x, y = self._sample(np.array([t], dtype=float))[0]
        return float(x), float(y)

    def arc_length(self, t: float = 1.0, steps: Optional[int] = None) -> float:
        """Polyline length of the curve from ``0`` to ``t``."""

        steps, _ = _resolve(steps, None)
        if steps < 1:
            raise ValueError(f"steps must be positive, got {steps}")
        samples = self._sample(np.linspace(0.0, t, steps + 1))
        deltas = np.diff(samples, axis=0)
        return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())

    @property
    def total_length(self) -> float:
        return self.arc_length(1.0)

    def integrated_length(self, t: float = 1.0) -> float:
        """Arc length from ``0`` to ``t`` by adaptive quadrature of the speed."""

        controls = self._control_array()

        def speed(u: float) -> float:
            dx, dy = self._derivative_basis(np.array([u], dtype=float))[0] @ controls
            return math.hypot(dx, dy)

        value, _ = quad(speed, 0.0, t)
        return float(value)

    def point_at_length(
        self,
        length: float,
        steps: Optional[int] = None,
        tolerance: Optional[float] = None,
    ) -> Point:
        """Point at ``length`` along the curve measured from its start."""

        steps, tolerance = _resolve(steps, tolerance)
        if length <= 0:
            return self.start
        if length >= self.arc_length(1.0, steps):
            return self.end

        t0, t1, tm = 0.0, 1.0, 0.5
        for _ in range(steps):
            tm = (t0 + t1) / 2
            measured = self.arc_length(tm, steps)
            if abs(measured - length) < tolerance:
                break
            if measured < length:
                t0 = tm
            else:
                t1 = tm
        return self.evaluate(tm)

    def point_from_end(
        self,
        length: float,
        steps: Optional[int] = None,
        tolerance: Optional[float] = None,
    ) -> Point:
        """Point at ``length`` along the curve measured back from its end."""

        steps, tolerance = _resolve(steps, tolerance)
        return self.point_at_length(self.arc_length(1.0, steps) - length, steps, tolerance)


@dataclass(frozen=True)
class QuadBezier(_BezierCurve):
    p0: Point
    p1: Point
    p2: Point

    def _control_array(self) -> np.ndarray:
        return np.array([self.p0, self.p1, self.p2], dtype=float)

    def _basis(self, t: np.ndarray) -> np.ndarray:
        mt = 1.0 - t
        return np.stack([mt * mt, 2.0 * mt * t, t * t], axis=1)

    def _derivative_basis(self, t: np.ndarray) -> np.ndarray:
        return np.stack([-2.0 * (1.0 - t), 2.0 - 4.0 * t, 2.0 * t], axis=1)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p2


@dataclass(frozen=True)
class CubicBezier(_BezierCurve):
    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def _control_array(self) -> np.ndarray:
        return np.array([self.p0, self.p1, self.p2, self.p3], dtype=float)

    def _basis(self, t: np.ndarray) -> np.ndarray:
        mt = 1.0 - t
        return np.stack([mt ** 3, 3.0 * mt * mt * t, 3.0 * mt * t * t, t ** 3], axis=1)

    def _derivative_basis(self, t: np.ndarray) -> np.ndarray:
        mt = 1.0 - t
        return np.stack(
            [
                -3.0 * mt * mt,
                3.0 * mt * mt - 6.0 * mt * t,
                6.0 * mt * t - 3.0 * t * t,
                3.0 * t * t,
            ],
            axis=1,
        )

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p3


__all__ = [
    "QuadBezier",
    "CubicBezier",
]
