"""TikZ rendering of paths."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Tuple

from .geometry import Point
from .path import Path
from .subpath import SubPath

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\tikzset{
  epath/line width/.store in=\epLW,      epath/line width=0.8pt,
  contour/.style={line width=\epLW, line join=round},
}
\begin{document}
%s
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


class _Frame:
    """Maps path coordinates (y down) to TikZ coordinates (y up)."""

    def __init__(self, points: Iterable[Point], *, normalize: bool, flip_y: bool) -> None:
        self.flip = -1.0 if flip_y else 1.0
        self.cx = self.cy = 0.0
        self.scale = 1.0
        pts = list(points)
        if normalize and pts:
            xs = [p[0] for p in pts]
            ys = [p[1] for p in pts]
            span = max(max(xs) - min(xs), max(ys) - min(ys), 1e-9)
            self.cx = 0.5 * (min(xs) + max(xs))
            self.cy = 0.5 * (min(ys) + max(ys))
            self.scale = 8.0 / span

    def coord(self, p: Point) -> str:
        x = (p[0] - self.cx) * self.scale
        y = (p[1] - self.cy) * self.scale * self.flip
        return f"({_format_float(x)}, {_format_float(y)})"


def _quad_as_cubic(p0: Point, c: Point, p2: Point) -> Tuple[Point, Point]:
    c1 = (p0[0] + 2.0 / 3.0 * (c[0] - p0[0]), p0[1] + 2.0 / 3.0 * (c[1] - p0[1]))
    c2 = (p2[0] + 2.0 / 3.0 * (c[0] - p2[0]), p2[1] + 2.0 / 3.0 * (c[1] - p2[1]))
    return c1, c2


def _emit_subpath(subpath: SubPath, frame: _Frame, style: str) -> Optional[str]:
    parts: List[str] = []
    current: Optional[Point] = None
    start: Optional[Point] = None
    for segment in subpath:
        if segment.kind == "move":
            current = start = segment.destination
            parts.append(frame.coord(current))
        elif segment.kind == "line":
            current = segment.destination
            parts.append(f"-- {frame.coord(current)}")
        elif segment.kind == "quad":
            control, dest = segment.points
            c1, c2 = _quad_as_cubic(current or dest, control, dest)
            parts.append(f".. controls {frame.coord(c1)} and {frame.coord(c2)} .. {frame.coord(dest)}")
            current = dest
        elif segment.kind == "cubic":
            c1, c2, dest = segment.points
            parts.append(f".. controls {frame.coord(c1)} and {frame.coord(c2)} .. {frame.coord(dest)}")
            current = dest
        elif segment.kind == "close":
            parts.append("-- cycle")
            current = start
        else:
            raise ValueError(f"unknown segment kind {segment.kind!r}")
    if not parts:
        return None
    return f"\\draw[{style}] " + " ".join(parts) + ";"


def generate_tikz_code(
    path: Path,
    *,
    normalize: bool = False,
    flip_y: bool = True,
    style: str = "contour",
) -> str:
    """One ``\\draw`` per sub-path inside a ``tikzpicture``.

    Path coordinates are screen coordinates, so ``flip_y`` mirrors them into
    TikZ's upward y axis. ``normalize`` centres the path and scales its longer
    side to 8 units.
    """

    frame = _Frame(
        (p for segment in path.segments() for p in segment.points),
        normalize=normalize,
        flip_y=flip_y,
    )
    lines: List[str] = ["\\begin{tikzpicture}"]
    for subpath in path.subpaths:
        rendered = _emit_subpath(subpath, frame, style)
        if rendered:
            lines.append("  " + rendered)
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(path: Path, *, normalize: bool = True, flip_y: bool = True) -> str:
    """Render a standalone LaTeX document containing the path."""

    return standalone_tpl % generate_tikz_code(path, normalize=normalize, flip_y=flip_y)


__all__ = [
    "generate_tikz_code",
    "generate_tikz_document",
]
