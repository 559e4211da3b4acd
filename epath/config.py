"""Tunables for the curve and rounding algorithms."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class CurveConfig:
    """Process-wide defaults used when callers do not pass explicit values."""

    # polyline samples for arc length, also the bisection iteration cap
    steps: int = 20
    # accepted error of the inverse arc-length lookup
    tolerance: float = 0.5
    # gap before ``close`` that normalization bridges with an explicit line
    closing_tolerance: float = 1.0
    # curve-to-curve turns below this many radians are not rounded
    min_curve_turn: float = 0.17


_CURVE_CONFIG = CurveConfig()


def get_curve_config() -> CurveConfig:
    return copy.deepcopy(_CURVE_CONFIG)


def set_curve_config(config: CurveConfig) -> None:
    global _CURVE_CONFIG
    if config.steps < 1:
        raise ValueError(f"steps must be positive, got {config.steps}")
    if config.tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {config.tolerance}")
    _CURVE_CONFIG = copy.deepcopy(config)


__all__ = [
    "CurveConfig",
    "get_curve_config",
    "set_curve_config",
]
