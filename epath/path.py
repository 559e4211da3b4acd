"""Path: ordered sub-paths transformed independently of each other."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .logging_utils import apply_debug_logging
from .rounding import RoundingRule, RoundingWarning, round_subpath
from .segments import Segment
from .subpath import SubPath
from .thinning import thin_subpath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    """A 2D path made of sub-paths.

    Sub-path order is the order in which a renderer fills or strokes them and
    is kept by every transform.
    """

    subpaths: Tuple[SubPath, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "subpaths", tuple(self.subpaths))

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> "Path":
        """Split a flat segment sequence into sub-paths after every ``close``."""

        subpaths: List[SubPath] = []
        current: List[Segment] = []
        for segment in segments:
            current.append(segment)
            if segment.is_close:
                subpaths.append(SubPath(current))
                current = []
        if current:
            subpaths.append(SubPath(current))
        return cls(tuple(subpaths))

    def segments(self) -> Tuple[Segment, ...]:
        """All segments of all sub-paths in drawing order."""

        return tuple(segment for subpath in self.subpaths for segment in subpath)

    def __len__(self) -> int:
        return len(self.subpaths)

    def __iter__(self) -> Iterator[SubPath]:
        return iter(self.subpaths)

    def __getitem__(self, index: int) -> SubPath:
        return self.subpaths[index]

    def thinned(self, min_length: float = 1.0) -> "Path":
        return thin_path(self, min_length)

    def rounded(self, radius: float, rule: RoundingRule = "all") -> "Path":
        """Rounded copy; rounding diagnostics go to the log."""

        result, warnings = round_path(self, radius, rule)
        for warning in warnings:
            logger.warning("Sub-path %d not rounded: %s", warning.subpath, warning)
        return result

    def __str__(self) -> str:
        return "".join(
            f"SubPath #{idx}:\n{subpath}\n" for idx, subpath in enumerate(self.subpaths)
        )


def thin_path(path: Path, min_length: float = 1.0) -> Path:
    return Path(tuple(thin_subpath(subpath, min_length) for subpath in path.subpaths))


def round_path(
    path: Path,
    radius: float,
    rule: RoundingRule = "all",
) -> Tuple[Path, List[RoundingWarning]]:
    """Thin every sub-path with ``radius / 2`` and round it.

    Returns the new path and the warnings of the sub-paths left unchanged,
    each tagged with its sub-path index.
    """

    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    subpaths: List[SubPath] = []
    warnings: List[RoundingWarning] = []
    for idx, subpath in enumerate(path.subpaths):
        rounded, sub_warnings = round_subpath(thin_subpath(subpath, radius / 2), radius, rule)
        for warning in sub_warnings:
            warning.subpath = idx
        subpaths.append(rounded)
        warnings.extend(sub_warnings)
    logger.info(
        "Rounded %d sub-path(s) with radius %.3f (%s), %d warning(s)",
        len(subpaths),
        radius,
        rule,
        len(warnings),
    )
    return Path(tuple(subpaths)), warnings


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "Path",
    "round_path",
    "thin_path",
]
