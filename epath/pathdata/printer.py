import math
from typing import List

from ..path import Path
from ..segments import Segment
from ..subpath import SubPath


def format_number(value: float, precision: int = 3) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite coordinate for path data")
    formatted = f"{value:.{precision}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _coords(segment: Segment, precision: int) -> str:
    return " ".join(
        f"{format_number(x, precision)} {format_number(y, precision)}" for x, y in segment.points
    )


def format_segment(segment: Segment, precision: int = 3) -> str:
    if segment.kind == "move":
        return f"M {_coords(segment, precision)}"
    if segment.kind == "line":
        return f"L {_coords(segment, precision)}"
    if segment.kind == "quad":
        return f"Q {_coords(segment, precision)}"
    if segment.kind == "cubic":
        return f"C {_coords(segment, precision)}"
    if segment.kind == "close":
        return "Z"
    raise ValueError(f"unknown segment kind {segment.kind!r}")


def format_subpath(subpath: SubPath, precision: int = 3) -> str:
    return " ".join(format_segment(segment, precision) for segment in subpath)


def print_path_data(path: Path, precision: int = 3) -> str:
    """Absolute SVG path data, one sub-path per line."""

    lines: List[str] = [format_subpath(subpath, precision) for subpath in path.subpaths]
    return "\n".join(lines)
