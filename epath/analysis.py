from dataclasses import dataclass
from typing import List

from .path import Path
from .segments import Segment
from .subpath import SubPath


@dataclass
class ShortSegmentWarning:
    subpath: int
    index: int
    segment: Segment
    length: float
    min_length: float

    @property
    def message(self) -> str:
        return (
            f"{self.index}: {self.segment} small! "
            f"[{self.length:.1f} < {self.min_length:.1f}]"
        )

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


def _short_segments(subpath: SubPath, subpath_index: int, min_length: float) -> List[ShortSegmentWarning]:
    warnings: List[ShortSegmentWarning] = []
    for idx in range(1, len(subpath)):
        if subpath[idx].is_close:
            continue
        chord = subpath.chord_length(idx)
        if chord <= min_length:
            warnings.append(
                ShortSegmentWarning(subpath_index, idx, subpath[idx], chord, min_length)
            )
    return warnings


def check_short_segments(path: Path, min_length: float = 1.0) -> List[ShortSegmentWarning]:
    """Segments whose chord is not longer than ``min_length``.

    These are the segments thinning would merge; long runs of them usually
    mean the outline came from a tracer and should be thinned before rounding.
    """

    warnings: List[ShortSegmentWarning] = []
    for idx, subpath in enumerate(path.subpaths):
        warnings.extend(_short_segments(subpath, idx, min_length))
    return warnings


def format_analysis(path: Path, min_length: float = 1.0) -> str:
    warnings = check_short_segments(path, min_length)
    lines: List[str] = []
    for idx in range(len(path.subpaths)):
        lines.append(f"SubPath #{idx}:")
        lines.extend(w.message for w in warnings if w.subpath == idx)
    return "\n".join(lines) + "\n"


__all__ = [
    "ShortSegmentWarning",
    "check_short_segments",
    "format_analysis",
]
